import json
import os


def _artifact_dict(artifact):
    if artifact.source == "remote":
        return {"source": "remote", "url": artifact.url, "checksum": artifact.checksum}
    return {"source": "local", "path": artifact.path}


def _module_dict(module):
    data = {"name": module.name, "type": module.kind}
    if module.path is not None:
        data["path"] = module.path
    data["dependencies"] = list(module.dependencies)
    if module.public_headers_path is not None:
        data["publicHeadersPath"] = module.public_headers_path
    if module.resources:
        data["resources"] = [{"rule": rule, "path": path} for rule, path in module.resources]
    settings = []
    if module.unsafe_flags:
        settings.append({"kind": "unsafeFlags", "value": list(module.unsafe_flags)})
    settings.extend({"kind": "headerSearchPath", "value": path} for path in module.header_search_paths)
    settings.extend({"kind": "define", "value": name} for name in module.defines)
    if settings:
        data["cSettings"] = settings
    if module.artifact is not None:
        data["artifact"] = _artifact_dict(module.artifact)
    return data


def to_dict(graph):
    """Plain-data view of a build graph, in a fixed key order."""
    return {
        "name": graph.name,
        "toolsVersion": graph.tools_version,
        "platforms": [{"name": p.name, "version": p.version} for p in graph.platforms],
        "products": [
            {"name": p.name, "type": p.kind, "targets": list(p.modules)} for p in graph.products
        ],
        "targets": [_module_dict(m) for m in graph.modules],
        "swiftLanguageVersions": list(graph.language_versions),
    }


def render_json(graph):
    return json.dumps(to_dict(graph), indent=2) + "\n"


# ---------------- Package.swift ----------------

def _q(value):
    return json.dumps(value)


def _string_list(values):
    return "[" + ", ".join(_q(v) for v in values) + "]"


def _swift_platform(platform):
    return f".{platform.name}(.v{platform.version.replace('.', '_')})"


def _swift_binary(module, package_root):
    artifact = module.artifact
    if artifact.source == "remote":
        return (
            "        .binaryTarget(\n"
            f"            name: {_q(artifact.name)},\n"
            f"            url: {_q(artifact.url)},\n"
            f"            checksum: {_q(artifact.checksum)}),"
        )
    path = os.path.relpath(artifact.path, os.path.abspath(package_root))
    return (
        "        .binaryTarget(\n"
        f"            name: {_q(artifact.name)},\n"
        f"            path: {_q(path)}),"
    )


def _swift_module(module):
    factory = ".testTarget" if module.kind == "test" else ".target"
    args = [f"name: {_q(module.name)}", f"dependencies: {_string_list(module.dependencies)}"]
    if module.path is not None:
        args.append(f"path: {_q(module.path)}")
    if module.public_headers_path is not None:
        args.append(f"publicHeadersPath: {_q(module.public_headers_path)}")
    if module.resources:
        copies = ", ".join(f".{rule}({_q(path)})" for rule, path in module.resources)
        args.append(f"resources: [{copies}]")
    settings = []
    if module.unsafe_flags:
        settings.append(f".unsafeFlags({_string_list(module.unsafe_flags)})")
    settings.extend(f".headerSearchPath({_q(path)})" for path in module.header_search_paths)
    settings.extend(f".define({_q(name)})" for name in module.defines)
    if settings:
        args.append(f"cSettings: [{', '.join(settings)}]")
    body = ",\n".join(f"            {arg}" for arg in args)
    return f"        {factory}(\n{body}),"


def render_swift(graph, package_root="."):
    """Render the graph as a SwiftPM manifest. Local bundle paths are written relative to package_root."""
    lines = [
        f"// swift-tools-version: {graph.tools_version}",
        "",
        "import PackageDescription",
        "",
        "let package = Package(",
        f"    name: {_q(graph.name)},",
        f"    platforms: [{', '.join(_swift_platform(p) for p in graph.platforms)}],",
        "    products: [",
    ]
    for product in graph.products:
        lines.append(f"        .{product.kind}(name: {_q(product.name)}, targets: {_string_list(product.modules)}),")
    lines.append("    ],")
    lines.append("    targets: [")
    for module in graph.modules:
        if module.kind == "binary":
            lines.append(_swift_binary(module, package_root))
        else:
            lines.append(_swift_module(module))
    lines.append("    ],")
    versions = ", ".join(f".v{v}" for v in graph.language_versions)
    lines.append(f"    swiftLanguageVersions: [{versions}]")
    lines.append(")")
    return "\n".join(lines) + "\n"
