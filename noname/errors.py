"""Compiler errors and the catalogue of their kinds."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any

from noname.span import Span


class ErrorKind(Enum):
    """Every kind of error the compiler can report."""

    UNEXPECTED_ERROR = auto()
    ASSIGNMENT_TO_IMMUTABLE_VARIABLE = auto()
    UNKNOWN_DEPENDENCY = auto()
    UNKNOWN_EXTERNAL_FN = auto()
    UNKNOWN_EXTERNAL_STRUCT = auto()
    MAIN_FUNCTION_IN_LIB = auto()
    SHADOWING_BUILT_IN = auto()
    PARSING_ERROR = auto()
    CONST_ARGUMENT_NOT_FOR_MAIN = auto()
    INVALID_FIELD_ACCESS_EXPRESSION = auto()
    NOT_A_STATIC_METHOD = auto()
    MISMATCH_FUNCTION_ARGUMENTS = auto()
    ORDER_OF_CONST_DECLARATION = auto()
    ORDER_OF_USE_DECLARATION = auto()
    MISSING_PARENTHESIS = auto()
    PUB_ARGUMENT_OUTSIDE_MAIN = auto()
    RECURSIVE_MAIN = auto()
    INVALID_TOKEN = auto()
    MISSING_TYPE = auto()
    MISSING_TOKEN = auto()
    EXPECTED_TOKEN = auto()
    INVALID_PATH = auto()
    INVALID_END_OF_LINE = auto()
    INVALID_FUNCTION_SIGNATURE = auto()
    INVALID_FUNCTION_NAME = auto()
    INVALID_TYPE_NAME = auto()
    INVALID_TYPE = auto()
    RESERVED_TYPE = auto()
    INVALID_ARRAY_SIZE = auto()
    INVALID_FIELD = auto()
    INVALID_RANGE_SIZE = auto()
    INVALID_STATEMENT = auto()
    MISSING_EXPRESSION = auto()
    INVALID_EXPRESSION = auto()
    INVALID_IDENTIFIER = auto()
    INVALID_FN_CALL = auto()
    USE_AFTER_FN = auto()
    WRONG_ARGUMENT_TYPE = auto()
    CANNOT_COMPUTE_EXPRESSION = auto()
    MISMATCH_TYPE = auto()
    UNDEFINED_VARIABLE = auto()
    ARGUMENT_TYPE_MISMATCH = auto()
    FUNCTION_RETURNS_TYPE = auto()
    MISSING_PUBLIC_ARG = auto()
    MISSING_PRIVATE_ARG = auto()
    CANNOT_CONVERT_TO_FIELD = auto()
    MISSING_RETURN = auto()
    NO_RETURN_EXPECTED = auto()
    SELF_HAS_ATTRIBUTE = auto()
    RETURN_TYPE_MISMATCH = auto()
    UNEXPECTED_RETURN = auto()
    STD_IMPORT = auto()
    DUPLICATE_MODULE = auto()
    PUBLIC_OUTPUT_RESERVED = auto()
    UNDEFINED_FUNCTION = auto()
    FUNCTION_NAME_IN_USE_BY_VARIABLE = auto()
    UNDEFINED_MODULE = auto()
    INVALID_ATTRIBUTE = auto()
    UNUSED_RETURN_VALUE = auto()
    ARRAY_INDEX_OUT_OF_BOUNDS = auto()
    NO_ONE_LETTER_VARIABLE = auto()
    EXPECTED_CONSTANT = auto()
    KIMCHI_SETUP = auto()
    KIMCHI_PROVER = auto()
    KIMCHI_VERIFIER = auto()
    INVALID_WITNESS = auto()
    UNUSED_INPUT = auto()
    PRIVATE_INPUT_NOT_USED = auto()
    DUPLICATE_DEFINITION = auto()
    INVALID_ASSIGNMENT_EXPRESSION = auto()
    NO_ARGS_IN_MAIN = auto()
    LOCAL_VARIABLE_NOT_FOUND = auto()
    CONSTANT_IN_OUTPUT = auto()
    MISMATCH_STRUCT_FIELDS = auto()
    INVALID_STRUCT_FIELD = auto()
    INVALID_STRUCT_FIELD_TYPE = auto()
    METHOD_CALL_ON_NON_CUSTOM_STRUCT = auto()
    ARRAY_ACCESS_ON_NON_ARRAY = auto()
    UNDEFINED_STRUCT = auto()
    UNDEFINED_FIELD = auto()
    ASSERTION_FAILED = auto()
    INVALID_CONST_TYPE = auto()
    NO_MAIN_FUNCTION = auto()
    INVALID_HEX_LITERAL = auto()

    @property
    def template(self) -> str:
        """The message template of this kind."""
        return _TEMPLATES[self]

    def describe(self, *args: Any) -> str:
        """Render the message of this kind with the given details."""
        try:
            return self.template.format(*args)
        except IndexError:
            raise TypeError(
                f"{self.name} needs more details than the {len(args)} given"
            ) from None


_TEMPLATES: dict[ErrorKind, str] = {
    ErrorKind.UNEXPECTED_ERROR: "Unexpected error: {0}. Please report this error",
    ErrorKind.ASSIGNMENT_TO_IMMUTABLE_VARIABLE: (
        "variable is not mutable. You must set the `mut` keyword to make it mutable"
    ),
    ErrorKind.UNKNOWN_DEPENDENCY: (
        "the dependency `{0}` does not appear to be listed in your manifest file `Noname.toml`"
    ),
    ErrorKind.UNKNOWN_EXTERNAL_FN: "the function `{1}` does not exist in the module `{0}`",
    ErrorKind.UNKNOWN_EXTERNAL_STRUCT: "the struct `{1}` does not exist in the module `{0}`",
    ErrorKind.MAIN_FUNCTION_IN_LIB: "you cannot have a function called `main` in a library",
    ErrorKind.SHADOWING_BUILT_IN: (
        "you cannot call your function `{0}`, as it already exists as a builtin function "
        "(try renaming your function)"
    ),
    ErrorKind.PARSING_ERROR: "{0}",
    ErrorKind.CONST_ARGUMENT_NOT_FOR_MAIN: (
        "the `const` attribute cannot be used for arguments of the main function"
    ),
    ErrorKind.INVALID_FIELD_ACCESS_EXPRESSION: (
        "a field access or a method call can only be applied on a field of another struct, "
        "a struct, or an array access"
    ),
    ErrorKind.NOT_A_STATIC_METHOD: "the method called is not a static method",
    ErrorKind.MISMATCH_FUNCTION_ARGUMENTS: "{0} arguments are passed when {1} were expected",
    ErrorKind.ORDER_OF_CONST_DECLARATION: (
        "constants must be declared before any structs or functions"
    ),
    ErrorKind.ORDER_OF_USE_DECLARATION: (
        "the `use` keyword must be used before anything else (consts, structs, functions, etc.)"
    ),
    ErrorKind.MISSING_PARENTHESIS: "cannot chain arithmetic operations without using parenthesis",
    ErrorKind.PUB_ARGUMENT_OUTSIDE_MAIN: (
        "the `pub` keyword is reserved for arguments of the main function"
    ),
    ErrorKind.RECURSIVE_MAIN: "the function main is not recursive",
    ErrorKind.INVALID_TOKEN: "invalid token",
    ErrorKind.MISSING_TYPE: "missing type",
    ErrorKind.MISSING_TOKEN: "missing token",
    ErrorKind.EXPECTED_TOKEN: "invalid token, expected: {0}",
    ErrorKind.INVALID_PATH: "invalid path: {0}",
    ErrorKind.INVALID_END_OF_LINE: "invalid end of line",
    ErrorKind.INVALID_FUNCTION_SIGNATURE: "invalid function signature: {0}",
    ErrorKind.INVALID_FUNCTION_NAME: "invalid function name",
    ErrorKind.INVALID_TYPE_NAME: "invalid type name",
    ErrorKind.INVALID_TYPE: (
        "invalid type, expected an array or a type name (starting with an uppercase letter, "
        "and only containing alphanumeric characters)"
    ),
    ErrorKind.RESERVED_TYPE: "the custom type name used: `{0}` is a reserved type name",
    ErrorKind.INVALID_ARRAY_SIZE: "invalid array size, expected [_; x] with x in [0,2^32]",
    ErrorKind.INVALID_FIELD: "the value passed could not be converted to a field element",
    ErrorKind.INVALID_RANGE_SIZE: (
        "invalid range size, expected x..y with x and y integers in [0,2^32]"
    ),
    ErrorKind.INVALID_STATEMENT: "invalid statement",
    ErrorKind.MISSING_EXPRESSION: "missing expression",
    ErrorKind.INVALID_EXPRESSION: "invalid expression",
    ErrorKind.INVALID_IDENTIFIER: (
        "invalid identifier `{0}`, expected lowercase alphanumeric string "
        "(including underscore `_`) and starting with a letter"
    ),
    ErrorKind.INVALID_FN_CALL: "invalid function call: {0}",
    ErrorKind.USE_AFTER_FN: "imports via `use` keyword must appear before anything else",
    ErrorKind.WRONG_ARGUMENT_TYPE: (
        "argument `{1}` of function {0} was passed a type {3} when it expected a {2}"
    ),
    ErrorKind.CANNOT_COMPUTE_EXPRESSION: "cannot compute the expression",
    ErrorKind.MISMATCH_TYPE: "type '{0}' and '{1}' are not compatible",
    ErrorKind.UNDEFINED_VARIABLE: "variable used is not defined anywhere",
    ErrorKind.ARGUMENT_TYPE_MISMATCH: (
        "unexpected argument type in function call. Expected: {0} and got {1}"
    ),
    ErrorKind.FUNCTION_RETURNS_TYPE: "the function `{0}` return value must be used",
    ErrorKind.MISSING_PUBLIC_ARG: "you need to pass the following public argument: `{0}`",
    ErrorKind.MISSING_PRIVATE_ARG: "you need to pass the following private argument: `{0}`",
    ErrorKind.CANNOT_CONVERT_TO_FIELD: "cannot convert `{0}` to field element",
    ErrorKind.MISSING_RETURN: "a return value was expected by the function signature",
    ErrorKind.NO_RETURN_EXPECTED: (
        "no return value was expected as part of this function signature"
    ),
    ErrorKind.SELF_HAS_ATTRIBUTE: "the `self` argument cannot have attributes",
    ErrorKind.RETURN_TYPE_MISMATCH: (
        "the return type observed (`{0}`) doesn't match what the function expected "
        "as return type (`{1}`)"
    ),
    ErrorKind.UNEXPECTED_RETURN: "missing return type in the function signature",
    ErrorKind.STD_IMPORT: "error while importing std path: {0}",
    ErrorKind.DUPLICATE_MODULE: "tried to import the same module `{0}` twice",
    ErrorKind.PUBLIC_OUTPUT_RESERVED: "`{0}` is a reserved argument name",
    ErrorKind.UNDEFINED_FUNCTION: "function `{0}` not present in scope (did you misspell it?)",
    ErrorKind.FUNCTION_NAME_IN_USE_BY_VARIABLE: (
        "function name `{0}` is already in use by a variable present in the scope"
    ),
    ErrorKind.UNDEFINED_MODULE: (
        "module `{0}` not present in scope (are you sure you imported it?)"
    ),
    ErrorKind.INVALID_ATTRIBUTE: "attribute not recognized: `{0!r}`",
    ErrorKind.UNUSED_RETURN_VALUE: "A return value is not used",
    ErrorKind.ARRAY_INDEX_OUT_OF_BOUNDS: (
        "array accessed at index {0} is out of bounds (max allowed index is {1})"
    ),
    ErrorKind.NO_ONE_LETTER_VARIABLE: (
        "one-letter variables or types are not allowed. Best practice is to use descriptive names"
    ),
    ErrorKind.EXPECTED_CONSTANT: "array indexes must be constants in circuits",
    ErrorKind.KIMCHI_SETUP: "kimchi setup: {0}",
    ErrorKind.KIMCHI_PROVER: "kimchi prover: {0}",
    ErrorKind.KIMCHI_VERIFIER: "kimchi verifier: {0}",
    ErrorKind.INVALID_WITNESS: (
        "the program did not run to completion with the given private and/or public inputs "
        "(row {0} of the witness failed to verify)"
    ),
    ErrorKind.UNUSED_INPUT: (
        "user provided input `{0}` is not defined in the main function's arguments"
    ),
    ErrorKind.PRIVATE_INPUT_NOT_USED: "private input not used in the circuit",
    ErrorKind.DUPLICATE_DEFINITION: "the variable `{0}` is declared twice",
    ErrorKind.INVALID_ASSIGNMENT_EXPRESSION: "only variables and arrays can be mutated",
    ErrorKind.NO_ARGS_IN_MAIN: "the main function must have at least one argument",
    ErrorKind.LOCAL_VARIABLE_NOT_FOUND: "local variable `{0}` couldn't be found",
    ErrorKind.CONSTANT_IN_OUTPUT: "the public output cannot contain constants",
    ErrorKind.MISMATCH_STRUCT_FIELDS: (
        "incorrect number of fields declared for the `{0}` struct declaration"
    ),
    ErrorKind.INVALID_STRUCT_FIELD: "invalid field, expected `{0}` and got `{1}`",
    ErrorKind.INVALID_STRUCT_FIELD_TYPE: (
        "invalid type for the field, expected `{0}` and got `{1}`"
    ),
    ErrorKind.METHOD_CALL_ON_NON_CUSTOM_STRUCT: (
        "method call can only be applied on custom structs"
    ),
    ErrorKind.ARRAY_ACCESS_ON_NON_ARRAY: "array access can only be performed on arrays",
    ErrorKind.UNDEFINED_STRUCT: "struct `{0}` does not exist (are you sure it is defined?)",
    ErrorKind.UNDEFINED_FIELD: "struct `{0}` does not have a field called `{1}`",
    ErrorKind.ASSERTION_FAILED: "this assertion failed",
    ErrorKind.INVALID_CONST_TYPE: "constants can only have a literal decimal value",
    ErrorKind.NO_MAIN_FUNCTION: "cannot compile a module without a main function",
    ErrorKind.INVALID_HEX_LITERAL: "invalid hexadecimal literal `${0}`",
}


class CompileError(Exception):
    """An error raised by one stage of the compiler, pointing at a span of source."""

    def __init__(self, label: str, kind: ErrorKind, span: Span, *args: Any) -> None:
        self.label = label
        self.kind = kind
        self.span = span
        self.details = args
        self.help = kind.describe(*args)
        super().__init__(f"Looks like something went wrong in {label}")