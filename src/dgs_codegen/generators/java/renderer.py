from typing import Any

from jinja2 import Environment, PackageLoader, select_autoescape

from dgs_codegen.generators.java.models import (
    AnnotationSpec,
    GeneratedArtifact,
    JavaClass,
    JavaInterface,
    JavaTypeRef,
    MethodSpec,
    ParameterSpec,
)

IMPLICIT_PACKAGES = {"java.lang"}


class ImportScope:
    """
    Decides how each referenced type is spelled inside one compilation unit.

    The first type seen with a given simple name claims it (the artifact's own
    name is claimed up front); a later type with the same simple name is written
    fully qualified. Primitives, ``java.lang`` and same-package types need no import.
    """

    def __init__(self, package: str, own_type: JavaTypeRef):
        self.package = package
        self._claimed: dict[str, JavaTypeRef] = {own_type.simple_name: own_type}

    def reference(self, type_ref: JavaTypeRef) -> str:
        if type_ref.is_primitive:
            return type_ref.simple_name
        claimed = self._claimed.setdefault(type_ref.simple_name, type_ref)
        return type_ref.simple_name if claimed == type_ref else type_ref.canonical_name

    @property
    def imports(self) -> list[str]:
        return sorted(
            type_ref.canonical_name
            for type_ref in self._claimed.values()
            if type_ref.package is not None
            and type_ref.package != self.package
            and type_ref.package not in IMPLICIT_PACKAGES
        )


class JavaRenderer:
    """Renders generated artifacts to Java source text with JavaPoet-style layout."""

    def __init__(self) -> None:
        self.env = Environment(
            loader=PackageLoader("dgs_codegen.generators.java", "templates"),
            autoescape=select_autoescape(),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def render(self, artifact: GeneratedArtifact) -> str:
        scope = ImportScope(artifact.package, artifact.type_ref)

        if isinstance(artifact, JavaClass):
            template = self.env.get_template("class.java.j2")
            template_vars = self._build_class_vars(artifact, scope)
        else:
            template = self.env.get_template("interface.java.j2")
            template_vars = self._build_interface_vars(artifact, scope)

        # imports are only known once every member has been spelled
        template_vars["package"] = artifact.package
        template_vars["imports"] = scope.imports
        return template.render(template_vars)

    def _build_class_vars(self, java_class: JavaClass, scope: ImportScope) -> dict[str, Any]:
        annotations = [self._annotation(scope, annotation) for annotation in java_class.annotations]
        fields = [
            {
                "annotations": [self._annotation(scope, annotation) for annotation in field.annotations],
                "type": scope.reference(field.type),
                "name": field.name,
            }
            for field in java_class.fields
        ]
        return {"name": java_class.name, "annotations": annotations, "fields": fields}

    def _build_interface_vars(self, interface: JavaInterface, scope: ImportScope) -> dict[str, Any]:
        annotations = [self._annotation(scope, annotation) for annotation in interface.annotations]
        methods = [self._method(scope, method) for method in interface.methods]
        return {"name": interface.name, "annotations": annotations, "methods": methods}

    def _method(self, scope: ImportScope, method: MethodSpec) -> dict[str, Any]:
        annotations = [self._annotation(scope, annotation) for annotation in method.annotations]
        return {
            "annotations": annotations,
            "return_type": scope.reference(method.return_type),
            "name": method.name,
            "parameters": [self._parameter(scope, parameter) for parameter in method.parameters],
        }

    def _parameter(self, scope: ImportScope, parameter: ParameterSpec) -> str:
        parts = [self._annotation(scope, annotation) for annotation in parameter.annotations]
        parts.append(scope.reference(parameter.type))
        parts.append(parameter.name)
        return " ".join(parts)

    def _annotation(self, scope: ImportScope, annotation: AnnotationSpec) -> str:
        name = f"@{scope.reference(annotation.type)}"
        if not annotation.members:
            return name

        # a repeated member name becomes an array value
        grouped: dict[str, list[str]] = {}
        for member in annotation.members:
            grouped.setdefault(member.name, []).append(member.value)
        values = {
            member_name: member_values[0] if len(member_values) == 1 else f"{{{', '.join(member_values)}}}"
            for member_name, member_values in grouped.items()
        }

        if list(values) == ["value"]:
            return f"{name}({values['value']})"
        return f"{name}({', '.join(f'{member_name} = {value}' for member_name, value in values.items())})"
