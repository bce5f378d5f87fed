QUERY_TYPE_NAME = "Query"
MUTATION_TYPE_NAME = "Mutation"


def is_root_operation_type(type_name: str) -> bool:
    """Only Query and Mutation are operation roots for fetchers; Subscription is a plain type here."""
    return type_name in {
        QUERY_TYPE_NAME,
        MUTATION_TYPE_NAME,
    }


def is_builtin_scalar_type(type_name: str) -> bool:
    return type_name in {
        "ID",
        "String",
        "Int",
        "Float",
        "Boolean",
    }
