import logconfig


def pytest_configure(config):
    verbosity = config.getoption("--verbose")
    logconfig.configure_fancylog(verbosity if verbosity > 0 else None)
