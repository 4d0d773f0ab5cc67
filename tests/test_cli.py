"""CLI behaviour tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from cssdts.cli import _build_parser, main
from tests._fixtures.module_builder import LOCALS_MODULE, ModuleBuilder, locals_module


def test_cli_accepts_verbose_before_and_after_command() -> None:
    parser = _build_parser()
    assert parser.parse_args(["--verbose", "emit", "a.css"]).verbose is True
    assert parser.parse_args(["verify", "a.css", "--verbose"]).verbose is True


def test_cli_parses_reconcile_arguments() -> None:
    parser = _build_parser()
    args = parser.parse_args(["emit", "a.css", "b.css", "--named-exports"])
    assert args.command == "emit"
    assert args.resources == ["a.css", "b.css"]
    assert args.named_exports is True
    assert args.compiled is None


def test_cli_emit_then_verify(module_builder: ModuleBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    resource = module_builder.resource("src/button.module.css", LOCALS_MODULE)
    config = ["--config", str(module_builder.root)]

    main([*config, "emit", str(resource)])
    main([*config, "emit", str(resource)])
    main([*config, "verify", str(resource)])

    out = capsys.readouterr().out.splitlines()
    assert out[0].startswith("Declaration written to")
    assert out[1].startswith("Declaration up to date")
    assert out[2].startswith("Declaration up to date")
    assert Path(f"{resource}.d.ts").exists()


def test_cli_verify_fails_for_stale_declaration(
    module_builder: ModuleBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    resource = module_builder.resource("card.css", locals_module(["a"]))
    config = ["--config", str(module_builder.root)]
    main([*config, "emit", str(resource)])
    Path(f"{resource}.js").write_text(locals_module(["a", "b"]), encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main([*config, "verify", str(resource)])

    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert "outdated" in err
    assert "+  'b': string;" in err


def test_cli_uses_explicit_compiled_file(module_builder: ModuleBuilder, tmp_path: Path) -> None:
    compiled = tmp_path / "bundle-output.js"
    compiled.write_text('export { _1 as "chip" };', encoding="utf-8")
    resource = module_builder.root / "chip.css"

    main(["--config", str(module_builder.root), "emit", str(resource), "--compiled", str(compiled)])

    assert "'chip': string;" in Path(f"{resource}.d.ts").read_text(encoding="utf-8")


def test_cli_named_exports_from_config(module_builder: ModuleBuilder) -> None:
    (module_builder.root / ".cssdts.yml").write_text("namedExports: true\n", encoding="utf-8")
    resource = module_builder.resource("nav.css", LOCALS_MODULE)

    main(["--config", str(module_builder.root), "emit", str(resource)])

    assert Path(f"{resource}.d.ts").read_text(encoding="utf-8").endswith("export = cssExports;\n")


def test_cli_reports_missing_compiled_file(
    module_builder: ModuleBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(module_builder.root), "emit", str(module_builder.root / "nope.css")])

    assert excinfo.value.code == 1
    assert "failed for 1 resource(s)" in capsys.readouterr().err


def test_cli_accepts_quiet_flag() -> None:
    parser = _build_parser()
    args = parser.parse_args(["verify", "a.css", "-q"])
    assert args.quiet is True
    assert args.verbose is False


def test_cli_reconcile_uses_mode_from_environment(
    module_builder: ModuleBuilder,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    resource = module_builder.resource("a.css", LOCALS_MODULE)
    config = ["--config", str(module_builder.root)]
    monkeypatch.setenv("CSSDTS_MODE", "verify")

    with pytest.raises(SystemExit) as excinfo:
        main([*config, "reconcile", str(resource)])

    assert excinfo.value.code == 1
    assert "does not exist" in capsys.readouterr().err
    assert not Path(f"{resource}.d.ts").exists()

    monkeypatch.setenv("CSSDTS_MODE", "emit")
    main([*config, "reconcile", str(resource)])
    assert Path(f"{resource}.d.ts").exists()


def test_cli_reconcile_uses_mode_from_config(module_builder: ModuleBuilder) -> None:
    (module_builder.root / ".cssdts.yml").write_text("mode: verify\n", encoding="utf-8")
    resource = module_builder.resource("b.css", LOCALS_MODULE)

    with pytest.raises(SystemExit):
        main(["--config", str(module_builder.root), "reconcile", str(resource)])

    assert not Path(f"{resource}.d.ts").exists()


def test_cli_explicit_command_ignores_unused_bad_mode(
    module_builder: ModuleBuilder, monkeypatch: pytest.MonkeyPatch
) -> None:
    resource = module_builder.resource("c.css", LOCALS_MODULE)
    monkeypatch.setenv("CSSDTS_MODE", "bogus")

    main(["--config", str(module_builder.root), "emit", str(resource)])

    assert Path(f"{resource}.d.ts").exists()


def test_cli_reconcile_rejects_bad_mode(
    module_builder: ModuleBuilder,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    resource = module_builder.resource("d.css", LOCALS_MODULE)
    monkeypatch.setenv("CSSDTS_MODE", "bogus")

    with pytest.raises(SystemExit):
        main(["--config", str(module_builder.root), "reconcile", str(resource)])

    assert "Invalid mode option: bogus" in capsys.readouterr().err
    assert not Path(f"{resource}.d.ts").exists()


def test_cli_reports_each_write_once(
    module_builder: ModuleBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    resource = module_builder.resource("e.css", LOCALS_MODULE)

    main(["--config", str(module_builder.root), "emit", str(resource)])

    captured = capsys.readouterr()
    assert (captured.out + captured.err).count("Declaration written to") == 1
