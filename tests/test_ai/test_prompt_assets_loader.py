"""Testes do loader de assets YAML de prompt."""

from __future__ import annotations

from pathlib import Path

import pytest

from ai.config import prompt_assets_loader as loader


@pytest.fixture
def prompts_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    prompts = tmp_path / "prompts_yaml"
    prompts.mkdir()
    monkeypatch.setattr(loader, "_PROMPTS_YAML_DIR", prompts)
    loader.clear_prompt_assets_cache()
    yield prompts
    loader.clear_prompt_assets_cache()


def test_resolve_relative_path_rejects_invalid_inputs() -> None:
    base_dir = Path("base")
    with pytest.raises(loader.PromptAssetError, match="relative_path vazio"):
        loader._resolve_relative_path(base_dir, "")
    with pytest.raises(loader.PromptAssetError, match="deve ser relativo"):
        loader._resolve_relative_path(base_dir, "/abs.yaml")
    with pytest.raises(loader.PromptAssetError, match="\\(\\.\\.\\) não permitido"):
        loader._resolve_relative_path(base_dir, "../segredo.yaml")


def test_load_prompt_yaml_raises_for_missing_non_file_and_non_dict(prompts_dir: Path) -> None:
    with pytest.raises(loader.PromptAssetError, match="nao encontrado"):
        loader.load_prompt_yaml("inexistente.yaml")

    (prompts_dir / "pasta").mkdir()
    with pytest.raises(loader.PromptAssetError, match="Caminho de prompt YAML invalido"):
        loader.load_prompt_yaml("pasta")

    (prompts_dir / "lista.yaml").write_text("- item\n", encoding="utf-8")
    with pytest.raises(loader.PromptAssetError, match="deve ser dict"):
        loader.load_prompt_yaml("lista.yaml")


def test_load_prompt_yaml_cache_is_cleared_explicitly(prompts_dir: Path) -> None:
    path = prompts_dir / "cache.yaml"
    path.write_text("rule: v1\n", encoding="utf-8")

    assert loader.load_prompt_text("cache.yaml", "rule") == "v1"
    path.write_text("rule: v2\n", encoding="utf-8")
    assert loader.load_prompt_text("cache.yaml", "rule") == "v1"

    loader.clear_prompt_assets_cache()
    assert loader.load_prompt_text("cache.yaml", "rule") == "v2"


def test_load_prompt_text_and_mapping_validation(prompts_dir: Path) -> None:
    (prompts_dir / "ok.yaml").write_text(
        "rule: Seja objetivo\nphrases:\n  EN: Hello\n  DE: Hallo\nbad: [1, 2]\n",
        encoding="utf-8",
    )
    assert loader.load_prompt_text("ok.yaml", "rule") == "Seja objetivo"
    assert loader.load_prompt_mapping("ok.yaml", "phrases") == {"EN": "Hello", "DE": "Hallo"}

    with pytest.raises(loader.PromptAssetError, match="ausente"):
        loader.load_prompt_text("ok.yaml", "missing")
    with pytest.raises(loader.PromptAssetError, match="dict não vazio"):
        loader.load_prompt_mapping("ok.yaml", "bad")


def test_mapping_values_must_be_text(prompts_dir: Path) -> None:
    (prompts_dir / "num.yaml").write_text("phrases:\n  EN: 3\n", encoding="utf-8")
    with pytest.raises(loader.PromptAssetError, match="deve ser texto"):
        loader.load_prompt_mapping("num.yaml", "phrases")


def test_shipped_assets_load() -> None:
    """Os YAML versionados do repositório carregam sem erro."""
    loader.clear_prompt_assets_cache()
    for name in ("chat_policy.yaml", "intake_rules.yaml", "gate_instructions.yaml"):
        assert loader.load_prompt_yaml(name)["version"] == 1
