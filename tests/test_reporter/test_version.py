import pytest

from slimargs.exceptions import MetadataUnreadableError
from slimargs.reporter import Reporter


@pytest.mark.asyncio
async def test_render_version(registry, pyproject, console, output):
    await Reporter(registry, metadata_path=pyproject, console=console).render_version()
    assert output.getvalue() == "v1.2.3\n"


@pytest.mark.asyncio
async def test_render_version_from_package_json(registry, tmp_path, console, output):
    path = tmp_path / "package.json"
    path.write_text(
        '{"name": "@slimio/arg-parser", "description": "", "version": "0.1.0"}',
        encoding="UTF-8",
    )
    await Reporter(registry, metadata_path=path, console=console).render_version()
    assert output.getvalue() == "v0.1.0\n"


@pytest.mark.asyncio
async def test_render_version_from_env(registry, pyproject, console, output, monkeypatch):
    monkeypatch.setenv("SLIMARGS_METADATA", str(pyproject))
    await Reporter(registry, console=console).render_version()
    assert output.getvalue() == "v1.2.3\n"


@pytest.mark.asyncio
async def test_render_version_unreadable(registry, tmp_path, console):
    path = tmp_path / "pyproject.toml"
    path.write_text("[project\nname = ", encoding="UTF-8")

    with pytest.raises(MetadataUnreadableError):
        await Reporter(registry, metadata_path=path, console=console).render_version()


def test_format_version(registry, pyproject):
    reporter = Reporter(registry, metadata_path=pyproject)
    assert reporter.format_version(reporter.read_metadata()) == "v1.2.3"


@pytest.mark.asyncio
async def test_render_version_from_package_file(
    registry, pyproject, console, output, monkeypatch
):
    module_file = pyproject.parent / "pkg" / "main.py"
    module_file.parent.mkdir()
    module_file.write_text("", encoding="UTF-8")
    monkeypatch.chdir(module_file.parent.parent.parent)

    await Reporter(registry, console=console, package_file=module_file).render_version()
    assert output.getvalue() == "v1.2.3\n"
