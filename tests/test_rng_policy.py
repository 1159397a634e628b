"""Static checks that the reef package only draws from injected generators."""

import ast
from pathlib import Path

import pytest

REEF_ROOT = Path(__file__).resolve().parents[1] / "reef"
CONSTRUCTORS = {"Random", "SystemRandom"}

SOURCES = sorted(p for p in REEF_ROOT.rglob("*.py") if "__pycache__" not in p.parts)


def _module_aliases(tree):
    """Names under which the ``random`` module is bound in a module."""
    names = set()
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            names.update(a.asname or a.name for a in node.names if a.name == "random")
    return names


def _global_draws(tree):
    """Line numbers of anything that reaches the module-level generator."""
    aliases = _module_aliases(tree)
    attribute_bases = set()
    problems = []
    for node in ast.walk(tree):
        if isinstance(node, ast.ImportFrom) and node.module == "random":
            problems += [(node.lineno, a.name) for a in node.names if a.name not in CONSTRUCTORS]
        elif isinstance(node, ast.Attribute) and isinstance(node.value, ast.Name):
            if node.value.id in aliases:
                attribute_bases.add(id(node.value))
                if node.attr not in CONSTRUCTORS:
                    problems.append((node.lineno, f"{node.value.id}.{node.attr}"))
    for node in ast.walk(tree):
        # A bare ``random`` passed around as a value is the global generator too
        if isinstance(node, ast.Name) and node.id in aliases and id(node) not in attribute_bases:
            problems.append((node.lineno, node.id))
    return problems


def _unseeded_constructions(tree):
    aliases = _module_aliases(tree)
    return [
        node.lineno
        for node in ast.walk(tree)
        if isinstance(node, ast.Call)
        and isinstance(node.func, ast.Attribute)
        and node.func.attr == "Random"
        and isinstance(node.func.value, ast.Name)
        and node.func.value.id in aliases
        and not node.args
        and not node.keywords
    ]


def _parse(path):
    return ast.parse(path.read_text(encoding="utf-8"), filename=str(path))


def test_reef_sources_found():
    assert any(path.name == "engine.py" for path in SOURCES)


@pytest.mark.parametrize("path", SOURCES, ids=lambda p: str(p.relative_to(REEF_ROOT)))
def test_module_never_uses_global_random(path):
    problems = _global_draws(_parse(path))
    assert not problems, f"{path.name} draws from the global generator at {problems}"


@pytest.mark.parametrize("path", SOURCES, ids=lambda p: str(p.relative_to(REEF_ROOT)))
def test_module_never_builds_unseeded_random(path):
    # e.g. ``rng = rng or random.Random()`` silently breaks replays
    lines = _unseeded_constructions(_parse(path))
    assert not lines, f"{path.name} builds random.Random() without a seed on lines {lines}"
