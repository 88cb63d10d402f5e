"""
downline: Group or flatten the JSON document in <file> (or stdin)

Usage:
    downline group-by <selector> [options] [<file>]
    downline flatten-deep [options] [<file>]
    downline flatten [--depth=<depth>] [options] [<file>]

Options:
    --depth=<depth>  Remove at most <depth> levels of nesting [default: 1]
    --verbose=<level>  Output all logging information for <level> and above
    --ignore=<channel,channel>  Ignore all logging from the specified channels
    --no-color  Do not use color highlighting when printing JSON

Environment:
    VERBOSE  Logging level, or a single channel name to show
    IGNORE  Comma separated channels to hide
    LEVEL  Extra stderr handler at this level, limited to channel NAME if set
"""

import json
import sys
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from docopt import docopt
from logbook import Logger

import logconfig

from .flattening import flatten_deep, flatten_depth
from .grouping import group_by
from .requester import PlainRequester, Requester

log = Logger("cli")


def load(filename: Optional[str]) -> Any:
    if filename is None or filename == "-":
        return json.load(sys.stdin)
    with Path(filename).open() as io:
        return json.load(io)


def json_key(key: Any) -> str:
    (text,) = json.loads(json.dumps({key: None}))
    return text


def check_keys(groups: Mapping[Any, Any]) -> None:
    """JSON objects only have string keys, so distinct keys must stay distinct."""
    seen: Dict[str, Any] = {}
    for key in groups:
        text = json_key(key)
        if text in seen:
            raise ValueError(
                f"Keys {seen[text]!r} and {key!r} would both be written as {text!r}"
            )
        seen[text] = key


def transform(opts: Mapping[str, Any], data: Any) -> Any:
    if opts["group-by"]:
        groups = group_by(data, opts["<selector>"])
        check_keys(groups)
        return groups
    if opts["flatten-deep"]:
        return flatten_deep(data)
    return flatten_depth(data, int(opts["--depth"]))


def main(opts: Mapping[str, Any], requester: Requester) -> int:
    try:
        data = load(opts["<file>"])
        result = json.dumps(transform(opts, data), indent=2)
    except (OSError, RecursionError, TypeError, ValueError) as ex:
        log.error("{}", ex)
        return 1
    requester.formatted_output(result)
    return 0


def run() -> None:
    opts = docopt(__doc__)

    ignores_s = opts["--ignore"]
    if ignores_s:
        ignores = set(ignores_s.split(","))
    else:
        ignores = set()
    logconfig.configure_fancylog(opts["--verbose"], ignores)

    if opts["--no-color"]:
        requester = PlainRequester()
    else:
        requester = Requester()

    sys.exit(main(opts, requester))


if __name__ == "__main__":
    run()
