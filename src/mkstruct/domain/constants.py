from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Provides centralized access to the glyph families understood by the tree
normalizer, the canonical grammar tokens, and the well-known extensionless
file names used by the path classifier.
"""

from typing import Dict, FrozenSet

APP_NAME = "mkstruct"
APP_VERSION = "1.2.0"

# -----------------------------------------------------------------------------
# TREE GLYPH FAMILIES (light, heavy, double, dashed)
# -----------------------------------------------------------------------------
BRANCH_GLYPHS = "├┣┠┝┞┟┡┢╟╠╞"
LAST_BRANCH_GLYPHS = "└┗┖┕┺┻┸┹╚╘"
CONTINUATION_GLYPHS = "│┃┆┇┊┋║╎╏"
HORIZONTAL_GLYPHS = "─━┄┅┈┉╌╍═"

# Width of one indentation level in the canonical grammar
INDENT_SIZE = 3

CANONICAL: Dict[str, str] = {
    "BRANCH": "├── ",
    "LAST_BRANCH": "└── ",
    "CONTINUATION": "│   ",
}

# -----------------------------------------------------------------------------
# PATH CLASSIFICATION
# -----------------------------------------------------------------------------

# Lower-cased names of extensionless entries that denote files
KNOWN_FILENAMES: FrozenSet[str] = frozenset({
    # Build and tooling
    "makefile", "gnumakefile", "dockerfile", "containerfile", "procfile",
    "jenkinsfile", "vagrantfile", "gemfile", "rakefile", "brewfile",
    "podfile", "justfile", "caddyfile", "pipfile", "snakefile",
    # Documentation and legal
    "license", "licence", "copying", "notice", "readme", "changelog",
    "contributing", "authors", "codeowners", "todo",
    # Dotfiles
    ".gitignore", ".gitattributes", ".gitmodules", ".gitkeep",
    ".dockerignore", ".npmignore", ".eslintignore", ".prettierignore",
    ".env", ".editorconfig", ".npmrc", ".nvmrc", ".yarnrc",
    ".babelrc", ".eslintrc", ".prettierrc", ".stylelintrc",
    ".python-version", ".flake8", ".pylintrc", ".coveragerc",
    ".htaccess", ".bashrc", ".zshrc", ".profile",
})

# Input formats reported by the detector
FORMAT_TREE = "tree"
FORMAT_FLAT = "flat"
FORMAT_EMPTY = "empty"
