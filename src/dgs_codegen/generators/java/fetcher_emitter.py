from graphql import DocumentNode, FieldDefinitionNode, InputValueDefinitionNode

from dgs_codegen import log
from dgs_codegen.config import SCHEMA_FILE_EXTENSION, GeneratorConfig
from dgs_codegen.errors import DuplicateFieldError
from dgs_codegen.generators.java.directives import NOT_NULL, translate_directives
from dgs_codegen.generators.java.models import AnnotationSpec, JavaInterface, JavaTypeRef, MethodSpec, ParameterSpec
from dgs_codegen.generators.java.naming import capitalize, ensure_java_identifier
from dgs_codegen.generators.java.type_resolver import resolve_java_type
from dgs_codegen.generators.utils.extraction import iter_root_operation_types
from dgs_codegen.generators.utils.graphql_type import MUTATION_TYPE_NAME, QUERY_TYPE_NAME

DGS_PACKAGE = "com.netflix.graphql.dgs"

DGS_COMPONENT = AnnotationSpec(type=JavaTypeRef(simple_name="DgsComponent", package=DGS_PACKAGE))
DGS_QUERY = AnnotationSpec(type=JavaTypeRef(simple_name="DgsQuery", package=DGS_PACKAGE))
DGS_MUTATION = AnnotationSpec(type=JavaTypeRef(simple_name="DgsMutation", package=DGS_PACKAGE))
INPUT_ARGUMENT = AnnotationSpec(type=JavaTypeRef(simple_name="InputArgument", package=DGS_PACKAGE))

DATA_FETCHING_ENVIRONMENT = JavaTypeRef(simple_name="DataFetchingEnvironment", package="graphql.schema")
CONTEXT_PARAMETER = ParameterSpec(name="dfe", type=DATA_FETCHING_ENVIRONMENT)

ROOT_OPERATION_MARKERS = {
    QUERY_TYPE_NAME: DGS_QUERY,
    MUTATION_TYPE_NAME: DGS_MUTATION,
}

FETCHER_SUFFIX = "Fetcher"


def fetcher_name_for(schema_file_name: str) -> str:
    """``user.graphqls`` -> ``UserFetcher``; only the first letter of the stem is changed."""
    stem = schema_file_name.removesuffix(SCHEMA_FILE_EXTENSION)
    return f"{capitalize(stem)}{FETCHER_SUFFIX}"


class FetcherEmitter:
    """
    Builds the DGS data fetcher interface for one schema file.

    Every field of ``type Query`` / ``type Mutation`` (including ``extend type`` blocks)
    becomes an abstract method marked ``@DgsQuery`` or ``@DgsMutation``. Its parameters
    are the field arguments, each bound with ``@InputArgument``, followed by the
    ``DataFetchingEnvironment dfe`` context parameter.
    """

    def __init__(self, config: GeneratorConfig):
        self.base_package = config.package_name
        self.package = config.fetchers_package

    def emit(self, document: DocumentNode, schema_file_name: str) -> JavaInterface:
        methods: list[MethodSpec] = []
        seen: dict[str, set[str]] = {QUERY_TYPE_NAME: set(), MUTATION_TYPE_NAME: set()}

        for root_type in iter_root_operation_types(document):
            root_name = root_type.name.value
            marker = ROOT_OPERATION_MARKERS[root_name]
            for field_node in root_type.fields or ():
                field_name = field_node.name.value
                if field_name in seen[root_name]:
                    raise DuplicateFieldError(root_name, field_name)
                seen[root_name].add(field_name)
                methods.append(self._build_method(field_node, marker))

        interface = JavaInterface(
            package=self.package,
            name=ensure_java_identifier(fetcher_name_for(schema_file_name), "class"),
            annotations=(DGS_COMPONENT,),
            methods=tuple(methods),
            source=schema_file_name,
        )
        log.debug(f"Built {interface.name} with {len(methods)} operations")
        return interface

    def _build_method(self, field_node: FieldDefinitionNode, marker: AnnotationSpec) -> MethodSpec:
        parameters = [self._build_parameter(argument) for argument in field_node.arguments or ()]
        parameters.append(CONTEXT_PARAMETER)

        return_type, _ = resolve_java_type(field_node.type, self.base_package)
        return MethodSpec(
            name=ensure_java_identifier(field_node.name.value, "method"),
            return_type=return_type,
            annotations=(marker,),
            parameters=tuple(parameters),
        )

    def _build_parameter(self, argument: InputValueDefinitionNode) -> ParameterSpec:
        java_type, non_null = resolve_java_type(argument.type, self.base_package)

        annotations: list[AnnotationSpec] = []
        if non_null:
            annotations.append(NOT_NULL)
        annotations.extend(translate_directives(argument.directives))
        annotations.append(INPUT_ARGUMENT)

        return ParameterSpec(
            name=ensure_java_identifier(argument.name.value, "parameter"),
            type=java_type,
            annotations=tuple(annotations),
        )
