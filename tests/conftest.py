"""Pytest fixtures for docdialect tests."""

import pytest
import yaml

from docdialect.dialects import Asciidoc, GitHubFlavoredMarkdown
from docdialect.models import Package


@pytest.fixture
def github() -> GitHubFlavoredMarkdown:
    return GitHubFlavoredMarkdown()


@pytest.fixture
def asciidoc() -> Asciidoc:
    return Asciidoc()


@pytest.fixture(params=[GitHubFlavoredMarkdown, Asciidoc], ids=["github", "asciidoc"])
def dialect(request):
    """Every dialect implementation, one test run each."""
    return request.param()


@pytest.fixture
def sample_tree() -> dict:
    """Sample documentation tree for a small parsing package."""
    return {
        "name": "parse",
        "import_path": "example.com/parse",
        "doc": "Package parse turns tokens into trees.",
        "level": 1,
        "consts": [
            {"decl": "const MaxDepth = 32", "doc": "MaxDepth limits nesting."},
        ],
        "vars": [
            {"decl": "var ErrEmpty = errors.New(\"empty\")", "doc": "ErrEmpty is returned for empty input."},
        ],
        "funcs": [
            {
                "name": "Run",
                "doc": "Run parses standard input.",
                "decl": "func Run() error",
                "level": 2,
            },
        ],
        "types": [
            {
                "name": "Parser",
                "doc": "Parser reads tokens.",
                "decl": "type Parser struct{}",
                "level": 2,
                "location": {
                    "path": "parser.go",
                    "start_line": 12,
                    "end_line": 14,
                    "repo": {"remote": "https://github.com/acme/parse"},
                },
                "funcs": [
                    {
                        "name": "NewParser",
                        "doc": "NewParser returns a ready Parser.",
                        "decl": "func NewParser() *Parser",
                        "level": 3,
                    },
                ],
                "methods": [
                    {
                        "name": "Parse",
                        "receiver": "p *Parser",
                        "doc": "Parse reads a whole file.",
                        "decl": "func (p *Parser) Parse(path string) (*Tree, error)",
                        "level": 3,
                        "examples": [
                            {
                                "name": "File",
                                "code": "tree, _ := p.Parse(\"a.txt\")\nfmt.Println(tree)",
                                "output": "tree(a.txt)",
                            },
                        ],
                    },
                ],
            },
        ],
    }


@pytest.fixture
def sample_package(sample_tree) -> Package:
    return Package.from_dict(sample_tree)


@pytest.fixture
def tree_file(tmp_path, sample_tree):
    """Sample tree written to a YAML file."""
    path = tmp_path / "tree.yaml"
    with open(path, "w") as f:
        yaml.dump(sample_tree, f)
    return path
