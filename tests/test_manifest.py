import json
import unittest
from appcore_resolver.artifacts import LocalArtifact, ReleasePin
from appcore_resolver.manifest import render_json, render_swift, to_dict
from appcore_resolver.package import assemble_graph
from appcore_resolver.selector import Resolution

class TestManifest(unittest.TestCase):

    def setUp(self):
        self.remote_graph = assemble_graph(Resolution(ReleasePin().artifact()))
        self.local_graph = assemble_graph(
            Resolution(LocalArtifact(name="Appcore", path="/repo/go/appcore/build/Appcore.xcframework")),
        )

    def test_remote_binary_carries_url_and_checksum(self):
        binary = to_dict(self.remote_graph)["targets"][1]
        self.assertEqual(binary["type"], "binary")
        self.assertEqual(binary["artifact"]["source"], "remote")
        self.assertEqual(binary["artifact"]["checksum"], ReleasePin().checksum)
        self.assertNotIn("path", binary["artifact"])

    def test_local_binary_carries_path_only(self):
        binary = to_dict(self.local_graph)["targets"][1]
        self.assertEqual(binary["artifact"], {"source": "local", "path": "/repo/go/appcore/build/Appcore.xcframework"})

    def test_library_settings(self):
        remote_library = to_dict(self.remote_graph)["targets"][0]
        self.assertNotIn("cSettings", remote_library)
        local_library = to_dict(self.local_graph)["targets"][0]
        self.assertEqual(local_library["cSettings"], [
            {"kind": "unsafeFlags", "value": ["-Werror=return-type", "-Werror=unused-variable", "-Werror"]},
        ])

    def test_test_target_settings(self):
        tests = to_dict(self.remote_graph)["targets"][2]
        self.assertEqual(tests["dependencies"], ["CriticalMoments"])
        self.assertEqual(tests["resources"], [{"rule": "copy", "path": "TestResources"}])
        self.assertEqual(tests["cSettings"], [
            {"kind": "headerSearchPath", "value": "../../Sources/CriticalMoments"},
            {"kind": "define", "value": "CRITICAL_MOMENTS_TESTING"},
        ])

    def test_render_json_is_deterministic(self):
        text = render_json(self.local_graph)
        self.assertEqual(text, render_json(self.local_graph))
        self.assertTrue(text.endswith("}\n"))
        self.assertEqual(json.loads(text), to_dict(self.local_graph))

    def test_render_swift_remote(self):
        text = render_swift(self.remote_graph, package_root="/repo")
        self.assertTrue(text.startswith("// swift-tools-version: 5.7\n"))
        self.assertIn("platforms: [.iOS(.v12)],", text)
        self.assertIn(f'url: "{ReleasePin().url}",', text)
        self.assertIn(f'checksum: "{ReleasePin().checksum}"),', text)
        self.assertIn('.library(name: "CriticalMoments", targets: ["CriticalMoments"]),', text)
        self.assertIn('.testTarget(', text)
        self.assertIn('.define("CRITICAL_MOMENTS_TESTING")', text)
        self.assertNotIn("unsafeFlags", text)
        self.assertIn("swiftLanguageVersions: [.v5]", text)

    def test_render_swift_local_uses_relative_path(self):
        text = render_swift(self.local_graph, package_root="/repo")
        self.assertIn('path: "go/appcore/build/Appcore.xcframework"),', text)
        self.assertIn('.unsafeFlags(["-Werror=return-type", "-Werror=unused-variable", "-Werror"])', text)
        self.assertNotIn("checksum", text)

if __name__ == "__main__":
    unittest.main()
