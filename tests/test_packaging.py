"""Packaging regression tests."""

from pathlib import Path


def test_source_layout():
    repo_root = Path(__file__).resolve().parents[1]
    src_pkg = repo_root / "src" / "buildergen"

    assert (src_pkg / "__init__.py").exists()
    assert (src_pkg / "kernel").is_dir()
    assert (src_pkg / "render").is_dir()
    assert (src_pkg / "_internal").is_dir()
    assert (repo_root / "pyproject.toml").exists()


def test_import_boundary():
    import buildergen.kernel.assemble  # noqa: F401
    import buildergen.render.python  # noqa: F401
    import buildergen.render.rust  # noqa: F401
    import buildergen._internal.canonical_json  # noqa: F401


def test_generate_schemas_script(tmp_path):
    import importlib.util

    script = Path(__file__).resolve().parents[1] / "scripts" / "generate_schemas.py"
    spec = importlib.util.spec_from_file_location("generate_schemas", script)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    written = module.generate_schemas(tmp_path / "schemas")

    assert sorted(p.name for p in written) == [
        "generated_artifact.schema.json",
        "record_schema.schema.json",
        "type_definition.schema.json",
    ]
