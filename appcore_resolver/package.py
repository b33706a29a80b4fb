from dataclasses import dataclass

from .selector import EMPTY_POLICY

PACKAGE_NAME = "CriticalMoments"
# Product, library module and test dependency must all use this exact name.
LIBRARY_NAME = "CriticalMoments"
TEST_MODULE_NAME = f"{LIBRARY_NAME}Tests"

LIBRARY_PATH = "ios/Sources/CriticalMoments"
PUBLIC_HEADERS_PATH = "include"
TEST_PATH = "ios/Tests/CriticalMomentsTests"
TEST_RESOURCES = "TestResources"
TEST_HEADER_SEARCH_PATH = "../../Sources/CriticalMoments"
TEST_INTERNAL_DEFINE = "CRITICAL_MOMENTS_TESTING"

TOOLS_VERSION = "5.7"
LANGUAGE_VERSIONS = ("5",)


@dataclass(frozen=True)
class Platform:
    name: str
    version: str


DEFAULT_PLATFORMS = (Platform("iOS", "12"),)


@dataclass(frozen=True)
class Product:
    name: str
    modules: tuple
    kind: str = "library"


@dataclass(frozen=True)
class ModuleDescriptor:
    name: str
    kind: str
    path: str = None
    dependencies: tuple = ()
    resources: tuple = ()
    public_headers_path: str = None
    unsafe_flags: tuple = ()
    header_search_paths: tuple = ()
    defines: tuple = ()
    artifact: object = None


@dataclass(frozen=True)
class BuildGraph:
    name: str
    platforms: tuple
    products: tuple
    modules: tuple
    tools_version: str = TOOLS_VERSION
    language_versions: tuple = LANGUAGE_VERSIONS

    def module(self, name):
        for module in self.modules:
            if module.name == name:
                return module
        raise KeyError(name)

    def product(self, name):
        for product in self.products:
            if product.name == name:
                return product
        raise KeyError(name)


def library_module(dependency_name, diagnostics=EMPTY_POLICY, name=LIBRARY_NAME):
    return ModuleDescriptor(
        name=name,
        kind="regular",
        path=LIBRARY_PATH,
        dependencies=(dependency_name,),
        public_headers_path=PUBLIC_HEADERS_PATH,
        unsafe_flags=tuple(diagnostics),
    )


def binary_module(artifact):
    return ModuleDescriptor(name=artifact.name, kind="binary", artifact=artifact)


def tests_module(library_name=LIBRARY_NAME):
    return ModuleDescriptor(
        name=f"{library_name}Tests",
        kind="test",
        path=TEST_PATH,
        dependencies=(library_name,),
        resources=(("copy", TEST_RESOURCES),),
        header_search_paths=(TEST_HEADER_SEARCH_PATH,),
        defines=(TEST_INTERNAL_DEFINE,),
    )


def assemble_graph(resolution, name=PACKAGE_NAME, library_name=LIBRARY_NAME, platforms=DEFAULT_PLATFORMS):
    """Wire a Resolution into the package graph.

    The artifact and its diagnostics policy come in as one value, so the
    library only gets strict flags when it links a local build.
    """
    artifact = resolution.artifact
    return BuildGraph(
        name=name,
        platforms=tuple(platforms),
        products=(Product(name=library_name, modules=(library_name,)),),
        modules=(
            library_module(artifact.name, resolution.diagnostics, name=library_name),
            binary_module(artifact),
            tests_module(library_name),
        ),
    )
