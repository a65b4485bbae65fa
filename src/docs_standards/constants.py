DEFAULT_SIGIL = "$"

OPTIONAL_MARKER = "Optional."
DEFAULT_MARKER = "Default "

ARRAY_TYPE_TOKEN = "array"
CALLABLE_TYPE_TOKEN = "callable"
FORBIDDEN_CALLBACK_TOKEN = "callback"

# Class hints with this name carry no information, like an untyped param
CATCH_ALL_CLASS_NAME = "object"

# Builtin scalars are plain type hints, not class hints
SCALAR_TYPE_NAMES = {
    "int",
    "float",
    "complex",
    "str",
    "bytes",
    "bool",
    "NoneType",
}

ARRAY_TYPE_NAMES = {
    "list",
    "tuple",
    "dict",
    "Sequence",
    "MutableSequence",
    "Mapping",
    "MutableMapping",
}
