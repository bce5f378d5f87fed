from graphql import BooleanValueNode, DirectiveNode, IntValueNode, StringValueNode, ValueNode

LiteralValue = str | int | bool


def get_literal_value(value: ValueNode) -> LiteralValue | None:
    """Convert a String, Int or Boolean value node to its Python value; other kinds give None."""
    if isinstance(value, StringValueNode):
        return value.value
    if isinstance(value, IntValueNode):
        return int(value.value)
    if isinstance(value, BooleanValueNode):
        return value.value
    return None


def get_literal_arguments(directive: DirectiveNode) -> list[tuple[str, LiteralValue]]:
    """
    Extracts the literal arguments of a directive, in source order.

    Arguments whose value is not a String, Int or Boolean literal (floats, enums,
    lists, objects, variables, null) are left out.

    Args:
        directive: The directive node from the parsed document.
    Returns:
        list[tuple[str, LiteralValue]]: (argument name, value) pairs.
    """
    arguments: list[tuple[str, LiteralValue]] = []
    for argument in directive.arguments or ():
        value = get_literal_value(argument.value)
        if value is not None:
            arguments.append((argument.name.value, value))
    return arguments
