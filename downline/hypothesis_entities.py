import operator as op

from hypothesis.strategies import (
    booleans,
    fixed_dictionaries,
    integers,
    just,
    lists,
    none,
    one_of,
    recursive,
    sampled_from,
    text,
)

scalars = one_of(integers(), text(max_size=5), booleans(), none())

nested_lists = recursive(
    lists(scalars), lambda children: lists(one_of(scalars, children)), max_leaves=40
)

flat_lists = lists(scalars)

states = sampled_from(["NJ", "NY", "TX", "NV", "MA"])

users = fixed_dictionaries(
    {"name": text(max_size=8), "age": integers(0, 99), "state": states}
)

partial_users = one_of(users, fixed_dictionaries({"name": text(max_size=8)}), just({}))

unary_functions = sampled_from(
    [op.neg, abs, lambda n: n + 1, lambda n: n * 3, lambda n: n - 2]
)
