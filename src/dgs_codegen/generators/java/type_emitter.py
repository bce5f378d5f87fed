from graphql import DocumentNode, FieldDefinitionNode, InputValueDefinitionNode

from dgs_codegen import log
from dgs_codegen.config import GeneratorConfig
from dgs_codegen.generators.java.directives import NOT_NULL, translate_directives
from dgs_codegen.generators.java.models import AnnotationSpec, FieldSpec, JavaClass, JavaTypeRef
from dgs_codegen.generators.java.naming import ensure_java_identifier
from dgs_codegen.generators.java.type_resolver import resolve_java_type
from dgs_codegen.generators.utils.extraction import CollectedType, collect_data_types

LOMBOK_ANNOTATIONS = (
    AnnotationSpec(type=JavaTypeRef(simple_name="Data", package="lombok")),
    AnnotationSpec(type=JavaTypeRef(simple_name="NoArgsConstructor", package="lombok")),
    AnnotationSpec(type=JavaTypeRef(simple_name="AllArgsConstructor", package="lombok")),
)


class TypeEmitter:
    """
    Builds one Lombok data class per object type and input type of a schema document.

    Query and Mutation are never turned into classes. Only input-type fields carry
    validation metadata: ``@NotNull`` for a non-null field, then the annotations
    translated from its directives.
    """

    def __init__(self, config: GeneratorConfig):
        self.base_package = config.package_name
        self.package = config.types_package

    def emit(self, document: DocumentNode, source: str | None = None) -> list[JavaClass]:
        classes = [self._build_class(collected, source) for collected in collect_data_types(document)]
        log.debug(f"Built {len(classes)} type classes")
        return classes

    def _build_class(self, collected: CollectedType, source: str | None) -> JavaClass:
        fields = tuple(self._build_field(field_node, collected.is_input) for field_node in collected.fields)
        return JavaClass(
            package=self.package,
            name=ensure_java_identifier(collected.name, "class"),
            annotations=LOMBOK_ANNOTATIONS,
            fields=fields,
            source=source,
        )

    def _build_field(self, field_node: FieldDefinitionNode | InputValueDefinitionNode, is_input: bool) -> FieldSpec:
        java_type, non_null = resolve_java_type(field_node.type, self.base_package)

        annotations: list[AnnotationSpec] = []
        if is_input:
            if non_null:
                annotations.append(NOT_NULL)
            annotations.extend(translate_directives(field_node.directives))

        return FieldSpec(
            name=ensure_java_identifier(field_node.name.value, "field"),
            type=java_type,
            annotations=tuple(annotations),
        )
