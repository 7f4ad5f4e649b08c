from __future__ import annotations

import json
from pathlib import Path

import pytest

from mapsmith.adapters.encoding import encode_source_map
from mapsmith.adapters.filesystem import FileAssetURI, FileSystemEnvironment, content_type_for
from mapsmith.core.config import EnvironmentConfig
from mapsmith.core.exceptions import AssetResolutionError
from mapsmith.core.fingerprint import compute_fingerprint
from mapsmith.core.models import ProcessRequest
from mapsmith.core.processor import process_source_map


@pytest.fixture
def asset_root(tmp_path: Path) -> Path:
    assets = tmp_path / "assets"
    (assets / "css").mkdir(parents=True)
    (assets / "app.js").write_text("console.log('app');\n", encoding="utf-8")
    (assets / "lib.js").write_text("export const lib = 1;\n", encoding="utf-8")
    (assets / "css" / "site.css").write_text("body { margin: 0 }\n", encoding="utf-8")
    raw = [
        {"source": "app-ab12cd3.js", "generated": (1, 0), "original": (1, 0)},
        {"source": "lib.js", "generated": (1, 8), "original": (1, 7)},
        {"source": "app-ab12cd3.js", "generated": (2, 0), "original": (2, 0)},
    ]
    (assets / "app.js.map").write_text(encode_source_map(raw, filename="app-ab12cd3.js"))
    return assets


@pytest.fixture
def environment(asset_root: Path) -> FileSystemEnvironment:
    return FileSystemEnvironment(EnvironmentConfig(root=asset_root.parent, paths=[Path("assets")]))


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("app.js", "application/javascript"),
        ("module.mjs", "application/javascript"),
        ("site.css", "text/css"),
        ("app.js.map", "application/js-sourcemap+json"),
        ("site.css.map", "application/css-sourcemap+json"),
        ("logo.png", "image/png"),
    ],
)
def test_content_type_for(name: str, expected: str) -> None:
    assert content_type_for(name) == expected


def test_resolve_returns_structural_uri(environment: FileSystemEnvironment, asset_root: Path) -> None:
    uri = environment.resolve("css/site.css")
    assert uri == FileAssetURI(path=(asset_root / "css" / "site.css").resolve(), content_type="text/css")
    assert environment.resolve("css/site.css", accept="text/css") == uri
    assert str(uri).endswith("css/site.css?type=text/css")
    assert len({uri, environment.resolve("css/site.css")}) == 1


def test_resolve_accepts_absolute_paths(environment: FileSystemEnvironment, asset_root: Path) -> None:
    uri = environment.resolve(str(asset_root / "app.js"))
    assert environment.logical_path(uri) == "app.js"


def test_resolve_enforces_accept(environment: FileSystemEnvironment) -> None:
    with pytest.raises(AssetResolutionError, match="text/css"):
        environment.resolve("app.js", accept="text/css")


@pytest.mark.parametrize("path", ["missing.js", "../outside.js", "/etc/hostname"])
def test_resolve_missing_or_outside_paths(environment: FileSystemEnvironment, path: str) -> None:
    with pytest.raises(AssetResolutionError):
        environment.resolve(path)


def test_load_reads_sidecar_map(environment: FileSystemEnvironment, asset_root: Path) -> None:
    asset = environment.load(environment.resolve("app.js"))
    assert asset.logical_path == "app.js"
    assert [record["source"] for record in asset.source_map] == [
        "app-ab12cd3.js",
        "lib.js",
        "app-ab12cd3.js",
    ]
    assert asset.metadata["digest"] == compute_fingerprint((asset_root / "app.js").read_bytes())


def test_load_without_sidecar_has_no_map(environment: FileSystemEnvironment) -> None:
    asset = environment.load(environment.resolve("lib.js"))
    assert "map" not in asset.metadata
    assert asset.source_map == ()


def test_public_paths_use_prefix(environment: FileSystemEnvironment) -> None:
    context = environment.context_for()
    assert context.asset_path("app.js") == "/assets/app.js"
    assert context.asset_path("/css/site.css") == "/assets/css/site.css"
    assert context.asset_path("/assets/app.js") == "/assets/app.js"


def test_public_paths_with_digest(asset_root: Path) -> None:
    env = FileSystemEnvironment(
        EnvironmentConfig(root=asset_root, prefix="static", digest_public_paths=True)
    )
    digest = compute_fingerprint((asset_root / "lib.js").read_bytes())
    context = env.context_for()
    assert context.asset_path("lib.js") == f"/static/lib-{digest}.js"
    assert context.asset_path(f"/static/lib-{digest}.js") == f"/static/lib-{digest}.js"


def test_process_script_map_end_to_end(environment: FileSystemEnvironment, asset_root: Path) -> None:
    seed = {environment.resolve("css/site.css")}
    request = ProcessRequest(
        content_type="application/js-sourcemap+json",
        filename=str(asset_root / "app.js"),
        environment=environment,
        metadata={"links": seed},
    )
    result = process_source_map(request)

    assert result.links == {
        environment.resolve("app.js"),
        environment.resolve("lib.js"),
        environment.resolve("css/site.css"),
    }
    payload = json.loads(result.data)
    assert payload["file"] == "/assets/app.js"
    assert payload["sources"] == ["/assets/app.js", "/assets/lib.js"]
    assert payload["mappings"] == "AAAA,QCAO;ADCP"


def test_overlapping_load_paths_keep_matched_logical_path(tmp_path: Path) -> None:
    vendor = tmp_path / "vendor"
    vendor.mkdir()
    (vendor / "lib.js").write_text("export {};\n", encoding="utf-8")
    env = FileSystemEnvironment(EnvironmentConfig(root=tmp_path, paths=[Path("."), Path("vendor")]))

    uri = env.resolve("lib.js")

    assert env.load(uri).logical_path == "lib.js"
    assert env.load(env.resolve("vendor/lib.js")).logical_path == "vendor/lib.js"
    assert uri == env.resolve("vendor/lib.js")


def test_resolve_accepts_public_paths(environment: FileSystemEnvironment, asset_root: Path) -> None:
    uri = environment.resolve("/assets/css/site.css", accept="text/css")
    assert uri.path == (asset_root / "css" / "site.css").resolve()
    assert environment.logical_path(uri) == "css/site.css"


def test_reprocessing_public_output_is_stable(
    environment: FileSystemEnvironment, asset_root: Path
) -> None:
    request = ProcessRequest(
        content_type="application/js-sourcemap+json",
        filename="app.js",
        environment=environment,
    )
    first = process_source_map(request)
    (asset_root / "app.js.map").write_text(first.data, encoding="utf-8")

    second = process_source_map(request)

    assert second == first
    assert json.loads(second.data)["sources"] == ["/assets/app.js", "/assets/lib.js"]


def test_reprocessing_digested_output_is_stable(asset_root: Path) -> None:
    env = FileSystemEnvironment(EnvironmentConfig(root=asset_root, digest_public_paths=True))
    request = ProcessRequest(
        content_type="application/js-sourcemap+json",
        filename="app.js",
        environment=env,
    )
    first = process_source_map(request)
    (asset_root / "app.js.map").write_text(first.data, encoding="utf-8")

    second = process_source_map(request)

    app_digest = compute_fingerprint((asset_root / "app.js").read_bytes())
    assert json.loads(second.data)["file"] == f"/assets/app-{app_digest}.js"
    assert second == first


def test_digests_are_computed_once_per_context(
    asset_root: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    env = FileSystemEnvironment(EnvironmentConfig(root=asset_root, digest_public_paths=True))
    loads: list[str] = []
    original_load = env.load

    def counting_load(uri: FileAssetURI):
        loads.append(env.logical_path(uri))
        return original_load(uri)

    monkeypatch.setattr(env, "load", counting_load)
    context = env.context_for()
    first = context.asset_path("lib.js")

    assert context.asset_path("lib.js") == first
    assert context.asset_path(first) == first
    assert loads == ["lib.js"]
