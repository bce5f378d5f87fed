"""Pydantic models for the Java source artifacts produced by the generator."""

from pydantic import BaseModel, ConfigDict


class JavaTypeRef(BaseModel):
    """A reference to a Java type; primitives have no package."""

    model_config = ConfigDict(frozen=True)

    simple_name: str
    package: str | None = None

    @property
    def canonical_name(self) -> str:
        if self.package is None:
            return self.simple_name
        return f"{self.package}.{self.simple_name}"

    @property
    def is_primitive(self) -> bool:
        return self.package is None


class AnnotationMember(BaseModel):
    """One ``name = value`` pair of an annotation; ``value`` is already a Java literal."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: str


class AnnotationSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: JavaTypeRef
    members: tuple[AnnotationMember, ...] = ()


class FieldSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    type: JavaTypeRef
    annotations: tuple[AnnotationSpec, ...] = ()


class ParameterSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    type: JavaTypeRef
    annotations: tuple[AnnotationSpec, ...] = ()


class MethodSpec(BaseModel):
    """An abstract interface method."""

    model_config = ConfigDict(frozen=True)

    name: str
    return_type: JavaTypeRef
    annotations: tuple[AnnotationSpec, ...] = ()
    parameters: tuple[ParameterSpec, ...] = ()


class JavaClass(BaseModel):
    """A generated data class (type artifact)."""

    model_config = ConfigDict(frozen=True)

    package: str
    name: str
    annotations: tuple[AnnotationSpec, ...] = ()
    fields: tuple[FieldSpec, ...] = ()
    source: str | None = None

    @property
    def type_ref(self) -> JavaTypeRef:
        return JavaTypeRef(simple_name=self.name, package=self.package)


class JavaInterface(BaseModel):
    """A generated fetcher interface (fetcher artifact)."""

    model_config = ConfigDict(frozen=True)

    package: str
    name: str
    annotations: tuple[AnnotationSpec, ...] = ()
    methods: tuple[MethodSpec, ...] = ()
    source: str | None = None

    @property
    def type_ref(self) -> JavaTypeRef:
        return JavaTypeRef(simple_name=self.name, package=self.package)


GeneratedArtifact = JavaClass | JavaInterface
