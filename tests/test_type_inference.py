# pylint: disable=C0116
from logging import WARNING

from pytest import mark, raises

from context import config, errors, log, pprint, scope, type_inference, types
from utils import apply, func, identity, lambda_, let, name, num, number

show = pprint.show_type


@mark.integration
@mark.type_inference
@mark.parametrize(
    "tree,expected",
    (
        (num(5), "Number"),
        (let("x", num(), name("x")), "Number"),
        (apply(identity(), num()), "Number"),
        (lambda_("x", num(1)), "<0001> -> Number"),
        (identity(), "<0001> -> <0001>"),
        (lambda_("f", apply(name("f"), num())), "(Number -> <0002>) -> <0002>"),
        (
            lambda_("f", lambda_("x", apply(name("f"), apply(name("f"), name("x"))))),
            "(<0004> -> <0004>) -> <0004> -> <0004>",
        ),
        (let("id", identity(), apply(name("id"), num(3))), "Number"),
        (apply(lambda_("f", apply(name("f"), num())), identity()), "Number"),
        (
            let(
                "const",
                lambda_("a", lambda_("b", name("a"))),
                apply(name("const"), num(1), num(2)),
            ),
            "Number",
        ),
        (
            lambda_("x", let("y", name("x"), apply(name("y"), num()))),
            "(Number -> <0002>) -> <0002>",
        ),
    ),
)
def test_infer_type(tree, expected):
    actual = type_inference.infer_type(tree)
    assert expected == show(actual)


@mark.type_inference
def test_infer_type_identity_shares_one_type_var():
    actual = type_inference.infer_type(identity())
    assert isinstance(actual, types.FuncType)
    assert isinstance(actual.arg_type, types.TypeVar)
    assert actual.arg_type == actual.return_type


@mark.type_inference
@mark.parametrize(
    "tree",
    (
        num(),
        apply(identity(), num()),
        let("f", lambda_("x", num()), apply(name("f"), num(2))),
        apply(
            lambda_("g", lambda_("x", apply(name("g"), name("x")))), identity(), num()
        ),
    ),
)
def test_closed_numeric_expressions_end_in_number(tree):
    type_ = type_inference.infer_type(tree)
    while isinstance(type_, types.FuncType):
        type_ = type_.return_type
    assert type_ == number


@mark.type_inference
def test_infer_with_bound_name():
    inferer = type_inference.Inferer()
    bound = scope.Scope.from_dict({"x": number})
    substitution, actual = inferer.infer(name("x"), bound)
    assert substitution == {}
    assert actual == number


@mark.type_inference
def test_inferer_runs_never_share_type_vars():
    inferer = type_inference.Inferer()
    first = inferer.run(identity())
    second = inferer.run(identity())
    assert show(first) == "<0001> -> <0001>"
    assert show(second) == "<0002> -> <0002>"


@mark.type_inference
@mark.parametrize(
    "tree,error",
    (
        (name("x"), errors.UndefinedNameError),
        (lambda_("x", name("y")), errors.UndefinedNameError),
        (let("x", name("x"), num()), errors.UndefinedNameError),
        (apply(num(), num()), errors.TypeMismatchError),
        (
            apply(lambda_("f", apply(name("f"), num())), num(2)),
            errors.TypeMismatchError,
        ),
        (lambda_("x", apply(name("x"), name("x"))), errors.CircularTypeError),
        (
            lambda_("x", apply(apply(name("x"), num()), name("x"))),
            errors.CircularTypeError,
        ),
        (
            let("id", identity(), apply(name("id"), name("id"))),
            errors.CircularTypeError,
        ),
        (
            lambda_(
                "f",
                apply(
                    let("a", apply(name("f"), num()), identity("y")),
                    let("b", apply(name("f"), identity("z")), num()),
                ),
            ),
            errors.TypeMismatchError,
        ),
    ),
)
def test_infer_type_raises(tree, error):
    with raises(error):
        type_inference.infer_type(tree)


@mark.type_inference
def test_all_failures_are_inference_errors():
    circular = lambda_("x", apply(name("x"), name("x")))
    for tree in (name("x"), apply(num(), num()), circular):
        with raises(errors.InferenceError):
            type_inference.infer_type(tree)


@mark.type_inference
def test_lambda_scope_does_not_leak_into_siblings():
    tree = apply(lambda_("x", name("x")), name("x"))
    with raises(errors.UndefinedNameError):
        type_inference.infer_type(tree)


@mark.type_inference
@mark.parametrize(
    "tree,expected,n_errors",
    (
        (name("x"), "(Error)?", 1),
        (apply(num(), num()), "(Error)?", 1),
        (apply(identity(), name("y")), "(Error)?", 1),
        (
            apply(lambda_("f", let("a", apply(name("f"), num()), num(2))), num(3)),
            "(Number)?",
            1,
        ),
        (
            lambda_(
                "f",
                apply(
                    let("a", apply(name("f"), num()), identity("y")),
                    let("b", apply(name("f"), identity("z")), num()),
                ),
            ),
            "(Number -> <0002>) -> Number",
            1,
        ),
        (apply(name("f"), name("g")), "<0001>", 2),
    ),
)
def test_recovery_mode(tree, expected, n_errors):
    inferer = type_inference.Inferer(config.ConfigData(recover=True))
    actual = inferer.run(tree)
    assert expected == show(actual)
    assert n_errors == len(inferer.errors)


@mark.type_inference
def test_recovery_mode_still_raises_circular_type_error():
    recovering = config.ConfigData(recover=True)
    with raises(errors.CircularTypeError):
        type_inference.infer_type(
            lambda_("x", apply(name("x"), name("x"))), recovering
        )


@mark.type_inference
@mark.parametrize(
    "max_depth,tree",
    (
        (3, lambda_("a", lambda_("b", lambda_("c", num())))),
        (2, apply(identity(), num())),
        (1, let("x", num(), name("x"))),
    ),
)
def test_depth_limit(max_depth, tree):
    with raises(errors.DepthLimitError):
        type_inference.infer_type(tree, config.ConfigData(max_depth=max_depth))


@mark.type_inference
def test_depth_limit_is_exact():
    tree = lambda_("a", lambda_("b", lambda_("c", num())))
    actual = type_inference.infer_type(tree, config.ConfigData(max_depth=4))
    assert show(actual) == "<0001> -> <0002> -> <0003> -> Number"


@mark.type_inference
def test_default_depth_limit_stops_deep_trees():
    tree = num()
    for index in range(config.DEFAULT_MAX_DEPTH + 10):
        tree = lambda_(f"x{index}", tree)
    with raises(errors.DepthLimitError):
        type_inference.infer_type(tree)


@mark.type_inference
def test_inferer_recovers_after_depth_limit():
    inferer = type_inference.Inferer(config.ConfigData(max_depth=2))
    with raises(errors.DepthLimitError):
        inferer.run(apply(identity(), num()))
    assert inferer.run(num()) == number


@mark.type_inference
def test_fresh_type_vars_use_node_spans():
    tree = lambda_("x", name("x"))
    tree.span = (4, 11)
    actual = type_inference.infer_type(tree)
    assert actual.arg_type.span == (4, 11)
    assert func(actual.arg_type, actual.arg_type) == actual


class _RefusingPrinter:
    def __init__(self):
        raise AssertionError("The expression was rendered for a filtered record.")


@mark.type_inference
def test_filtered_log_records_skip_rendering_the_expression():
    printer = type_inference.main.ASTPrinter
    log.logger.setLevel(WARNING)
    type_inference.main.ASTPrinter = _RefusingPrinter
    try:
        actual = type_inference.infer_type(apply(identity(), num()))
    finally:
        type_inference.main.ASTPrinter = printer
        log.logger.setLevel(log.LOGGER_LEVEL)
    assert show(actual) == "Number"
