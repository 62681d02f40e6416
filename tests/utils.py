from context import base, types

span = (0, 0)
# NOTE: This is a dummy value to pass into to AST and type constructors.

number = types.NumberType(span)
error = types.ErrorType(span, True)

var = lambda value: types.TypeVar(span, value)
func = lambda arg_type, return_type: types.FuncType(span, arg_type, return_type)

num = lambda value=0: base.Number(span, value)
name = lambda value: base.Name(span, value)
apply = lambda func_, *args: (
    apply(base.Apply(span, func_, args[0]), *args[1:]) if args else func_
)
lambda_ = lambda param, body: base.Lambda(span, param, body)
let = lambda name_, value, body: base.Let(span, name_, value, body)
identity = lambda param="x": lambda_(param, name(param))
