from collections.abc import Iterable

from graphql import DirectiveNode

from dgs_codegen import log
from dgs_codegen.generators.java.models import AnnotationMember, AnnotationSpec, JavaTypeRef
from dgs_codegen.generators.utils.directive import LiteralValue, get_literal_arguments

VALIDATION_PACKAGE = "jakarta.validation.constraints"

NOT_NULL = AnnotationSpec(type=JavaTypeRef(simple_name="NotNull", package=VALIDATION_PACKAGE))

# Closed set: directive name -> Jakarta Bean Validation annotation
DIRECTIVE_TO_ANNOTATION = {
    "AssertFalse": "AssertFalse",
    "AssertTrue": "AssertTrue",
    "DecimalMax": "DecimalMax",
    "DecimalMin": "DecimalMin",
    "Digits": "Digits",
    "Email": "Email",
    "Future": "Future",
    "FutureOrPresent": "FutureOrPresent",
    "Max": "Max",
    "Min": "Min",
    "Negative": "Negative",
    "NegativeOrZero": "NegativeOrZero",
    "NotBlank": "NotBlank",
    "NotEmpty": "NotEmpty",
    "Null": "Null",
    "Past": "Past",
    "PastOrPresent": "PastOrPresent",
    "Pattern": "Pattern",
    "Positive": "Positive",
    "PositiveOrZero": "PositiveOrZero",
    "Size": "Size",
}

_JAVA_ESCAPES = {
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
    '"': '\\"',
    "\\": "\\\\",
}


def _is_iso_control(char: str) -> bool:
    code = ord(char)
    return code <= 0x1F or 0x7F <= code <= 0x9F


def java_string_literal(value: str) -> str:
    """Quote and escape a string as a Java string literal."""
    escaped = []
    for char in value:
        if char in _JAVA_ESCAPES:
            escaped.append(_JAVA_ESCAPES[char])
        elif _is_iso_control(char):
            escaped.append(f"\\u{ord(char):04x}")
        else:
            escaped.append(char)
    return f'"{"".join(escaped)}"'


def java_literal(value: LiteralValue) -> str:
    # bool first: it is a subclass of int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    return java_string_literal(value)


def translate_directive(directive: DirectiveNode) -> AnnotationSpec | None:
    """Translate one directive, or return None when it is not a recognized validation directive."""
    annotation_name = DIRECTIVE_TO_ANNOTATION.get(directive.name.value)
    if annotation_name is None:
        return None

    members = tuple(
        AnnotationMember(name=name, value=java_literal(value)) for name, value in get_literal_arguments(directive)
    )
    return AnnotationSpec(type=JavaTypeRef(simple_name=annotation_name, package=VALIDATION_PACKAGE), members=members)


def translate_directives(directives: Iterable[DirectiveNode] | None) -> list[AnnotationSpec]:
    """
    Translate schema directives into validation annotations.

    Directive order and argument order are preserved. Directives outside the recognized
    set (``@deprecated`` and the like) are skipped, as are arguments whose value is not
    a String, Int or Boolean literal.

    Args:
        directives: Directives attached to an argument or input field.
    Returns:
        list[AnnotationSpec]: One annotation per recognized directive.
    """
    annotations = []
    for directive in directives or ():
        annotation = translate_directive(directive)
        if annotation is None:
            log.debug(f"Ignoring directive @{directive.name.value}")
            continue
        annotations.append(annotation)
    return annotations
