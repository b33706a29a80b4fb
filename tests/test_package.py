import unittest
from appcore_resolver import package
from appcore_resolver.artifacts import LocalArtifact, ReleasePin
from appcore_resolver.manifest import render_swift
from appcore_resolver.selector import Resolution, resolve

LOCAL = LocalArtifact(name="Appcore", path="/repo/go/appcore/build/Appcore.xcframework")

class TestPackageAssembly(unittest.TestCase):

    def setUp(self):
        self.remote = ReleasePin().artifact()

    def test_assemble_remote_graph(self):
        graph = package.assemble_graph(Resolution(self.remote))

        self.assertEqual(graph.name, "CriticalMoments")
        self.assertEqual(graph.platforms, (package.Platform("iOS", "12"),))
        self.assertEqual(graph.tools_version, "5.7")
        self.assertEqual(graph.language_versions, ("5",))
        self.assertEqual([m.name for m in graph.modules], ["CriticalMoments", "Appcore", "CriticalMomentsTests"])
        self.assertEqual(graph.module("Appcore").artifact, self.remote)
        self.assertEqual(graph.module("CriticalMoments").unsafe_flags, ())

    def test_assemble_local_graph_carries_strict_flags(self):
        graph = package.assemble_graph(Resolution(LOCAL))
        library = graph.module("CriticalMoments")
        self.assertEqual(library.unsafe_flags, ("-Werror=return-type", "-Werror=unused-variable", "-Werror"))
        self.assertEqual(graph.module("Appcore").artifact, LOCAL)

    def test_remote_graph_never_carries_strict_flags(self):
        for checksum in [self.remote.checksum, "00" * 32]:
            remote = ReleasePin(checksum=checksum).artifact()
            for local_present in (False, None, 0):
                graph = package.assemble_graph(resolve(local_present, remote, LOCAL))
                self.assertEqual(graph.module("Appcore").artifact, remote)
                self.assertEqual(graph.module("CriticalMoments").unsafe_flags, ())
                self.assertNotIn("unsafeFlags", render_swift(graph))

    def test_assemble_graph_takes_no_separate_diagnostics(self):
        with self.assertRaises(TypeError):
            package.assemble_graph(Resolution(self.remote), diagnostics=())

    def test_names_are_consistent(self):
        graph = package.assemble_graph(Resolution(self.remote))
        product = graph.products[0]
        library = graph.module(package.LIBRARY_NAME)
        tests = graph.module(package.TEST_MODULE_NAME)

        self.assertEqual(product.name, library.name)
        self.assertEqual(product.modules, (library.name,))
        self.assertEqual(tests.dependencies, (library.name,))
        self.assertEqual(library.dependencies, (graph.module("Appcore").name,))

    def test_names_follow_custom_library_name(self):
        graph = package.assemble_graph(Resolution(self.remote), library_name="CMKit")
        self.assertEqual(graph.products[0].name, "CMKit")
        self.assertEqual(graph.module("CMKitTests").dependencies, ("CMKit",))

    def test_tests_module(self):
        module = package.tests_module()
        self.assertEqual(module.kind, "test")
        self.assertEqual(module.path, "ios/Tests/CriticalMomentsTests")
        self.assertEqual(module.resources, (("copy", "TestResources"),))
        self.assertEqual(module.header_search_paths, ("../../Sources/CriticalMoments",))
        self.assertEqual(module.defines, ("CRITICAL_MOMENTS_TESTING",))

    def test_partial_graph_without_filesystem(self):
        module = package.library_module("Appcore")
        self.assertEqual(module.dependencies, ("Appcore",))
        self.assertEqual(module.public_headers_path, "include")
        self.assertEqual(module.unsafe_flags, ())
        self.assertEqual(package.binary_module(LOCAL).kind, "binary")

    def test_lookup_unknown_module(self):
        graph = package.assemble_graph(Resolution(self.remote))
        with self.assertRaises(KeyError):
            graph.module("Missing")
        with self.assertRaises(KeyError):
            graph.product("Missing")

if __name__ == "__main__":
    unittest.main()
