"""Per-language regular-expression tables used by the structural matchers.

Tables are plain data keyed by canonical language tag. Adding a language means
adding entries here; the matchers themselves never branch on language.
All patterns are applied to a single added line with ``re.search``.
"""

import re
from enum import StrEnum
from typing import TypeAlias


class FunctionForm(StrEnum):
    """Syntactic shapes of a function header, in evaluation order."""

    DECLARATION = "declaration"
    EXPRESSION = "expression"
    METHOD = "method"


FunctionPatterns: TypeAlias = tuple[tuple[FunctionForm, re.Pattern[str]], ...]


def _compile(*patterns: str) -> tuple[re.Pattern[str], ...]:
    return tuple(re.compile(pattern) for pattern in patterns)


def _forms(*entries: tuple[FunctionForm, str]) -> FunctionPatterns:
    order = list(FunctionForm)
    ranked = sorted(entries, key=lambda entry: order.index(entry[0]))
    return tuple((form, re.compile(pattern)) for form, pattern in ranked)


# ── Control-flow exclusions ──────────────────────────────────────────
# A line matching any of these is never a function header, even when a generic
# method-form pattern accepts it (``for (let i = 0; i < n; i++) {``).

CONTROL_FLOW_EXCLUSIONS: tuple[re.Pattern[str], ...] = _compile(
    r"^\s*(?:\}\s*)?(?:for|foreach|while|if|else\s+if|elif|else|switch|catch|with|until|unless)\s*\(",
    r"^\s*(?:return|throw|new|await|yield)\b",
    r"^\s*delete\s+[\w$]",
)


# ── Function / method definitions ────────────────────────────────────

_JS_FUNCTIONS = _forms(
    (
        FunctionForm.DECLARATION,
        r"^\s*(?:export\s+)?(?:default\s+)?(?:async\s+)?function\b\s*\*?\s*\w+\s*\(",
    ),
    (
        FunctionForm.EXPRESSION,
        r"^\s*(?:export\s+)?(?:const|let|var)\s+\w+\s*=\s*(?:async\s*)?(?:\([^)]*\)|\w+)\s*=>",
    ),
    (
        FunctionForm.EXPRESSION,
        r"^\s*(?:export\s+)?(?:const|let|var)\s+\w+\s*=\s*(?:async\s+)?function\b\s*\*?\s*\w*\s*\(",
    ),
    (
        FunctionForm.METHOD,
        r"^\s*(?:static\s+)?(?:async\s+)?(?:get\s+|set\s+)?\*?\s*\w+\s*\([^()]*\)\s*\{",
    ),
)

_TS_FUNCTIONS = _forms(
    (
        FunctionForm.DECLARATION,
        r"^\s*(?:export\s+)?(?:default\s+)?(?:declare\s+)?(?:async\s+)?"
        r"function\b\s*\*?\s*\w+\s*(?:<.*>)?\s*\(",
    ),
    (
        FunctionForm.EXPRESSION,
        r"^\s*(?:export\s+)?(?:const|let|var)\s+\w+\s*(?::[^=]+)?=\s*(?:async\s*)?"
        r"(?:<[^>]*>\s*)?(?:\([^)]*\)|\w+)\s*(?::[^=]+)?=>",
    ),
    (
        FunctionForm.EXPRESSION,
        r"^\s*(?:export\s+)?(?:const|let|var)\s+\w+\s*(?::[^=]+)?=\s*(?:async\s+)?"
        r"function\b\s*\*?\s*\w*\s*\(",
    ),
    (
        FunctionForm.METHOD,
        r"^\s*(?:(?:public|private|protected|static|readonly|abstract|override|async)\s+)*"
        r"(?:get\s+|set\s+)?\*?\s*\w+\s*(?:<.*>)?\s*\([^()]*\)\s*(?::[^{;]+)?\{",
    ),
)

_JAVA_ANNOTATIONS = r"(?:@\w+(?:\([^)]*\))?\s+)*"
_JAVA_TYPE = r"[\w.$]+(?:<[^;(){}]*>)?(?:\[\])*"

FUNCTION_PATTERNS: dict[str, FunctionPatterns] = {
    "js": _JS_FUNCTIONS,
    "ts": _TS_FUNCTIONS,
    "py": _forms(
        (FunctionForm.DECLARATION, r"^\s*(?:async\s+)?def\s+\w+\s*\("),
        (FunctionForm.EXPRESSION, r"^\s*\w+\s*(?::[^=]+)?=\s*lambda\b"),
    ),
    "java": _forms(
        (
            FunctionForm.DECLARATION,
            rf"^\s*{_JAVA_ANNOTATIONS}"
            r"(?:(?:public|private|protected|static|final|abstract|synchronized|native|default)\s+)+"
            rf"(?:<[^>]+>\s+)?(?:{_JAVA_TYPE}\s+)?\w+\s*\([^;]*$",
        ),
        (
            FunctionForm.METHOD,
            rf"^\s*{_JAVA_ANNOTATIONS}(?:<[^>]+>\s+)?{_JAVA_TYPE}\s+\w+\s*\([^;]*\)\s*"
            r"(?:throws\s+[\w.,\s]+)?\{?\s*$",
        ),
    ),
    "go": _forms(
        (
            FunctionForm.DECLARATION,
            r"^\s*func\s+(?:\(\s*\w*\s*\*?[\w.]+(?:\[[^\]]*\])?\s*\)\s*)?\w+\s*(?:\[[^\]]*\])?\s*\(",
        ),
        (FunctionForm.EXPRESSION, r"^\s*\w+\s*:?=\s*func\s*\("),
    ),
    "rust": _forms(
        (
            FunctionForm.DECLARATION,
            r"^\s*(?:pub(?:\([^)]*\))?\s+)?(?:default\s+)?(?:const\s+)?(?:async\s+)?"
            r'(?:unsafe\s+)?(?:extern\s+(?:"[^"]*"\s+)?)?fn\s+\w+\s*(?:<.*>)?\s*\(',
        ),
        (
            FunctionForm.EXPRESSION,
            r"^\s*let\s+(?:mut\s+)?\w+\s*(?::[^=]+)?=\s*(?:async\s+)?(?:move\s+)?\|[^|]*\|",
        ),
    ),
    "ruby": _forms(
        (FunctionForm.DECLARATION, r"^\s*def\s+(?:self\.)?\w+[?!=]?"),
        (FunctionForm.EXPRESSION, r"^\s*define(?:_singleton)?_method\s*\(?\s*:\w+"),
    ),
}


# ── Import / dependency statements ───────────────────────────────────

_JS_IMPORTS = _compile(
    r"^\s*import\s+(?:type\s+)?(?:[\w*{}\s,$]+\s+from\s+)?['\"]",
    r"^\s*import\s+(?:type\s+)?\{[^}]*$",
    r"^\s*export\s+(?:type\s+)?(?:\*|\{[^}]*\})(?:\s+as\s+\w+)?\s+from\s+['\"]",
    r"\brequire\s*\(\s*['\"`]",
)

IMPORT_PATTERNS: dict[str, tuple[re.Pattern[str], ...]] = {
    "js": _JS_IMPORTS,
    "ts": _JS_IMPORTS,
    "py": _compile(
        r"^\s*import\s+[\w.]+",
        r"^\s*from\s+[\w.]+\s+import\b",
    ),
    "java": _compile(r"^\s*import\s+(?:static\s+)?[\w.]+(?:\.\*)?\s*;"),
    "go": _compile(
        r"^\s*import\s+(?:\(|(?:[\w.]+\s+)?\")",
        # Path inside an existing ``import (`` block, with an optional alias.
        r"^\s*(?:(?!return\b)[\w.]+\s+)?\"[\w.~/-]+\"\s*$",
    ),
    "rust": _compile(
        r"^\s*(?:pub(?:\([^)]*\))?\s+)?use\s+[\w:{]",
        r"^\s*extern\s+crate\s+\w+",
    ),
    "ruby": _compile(r"^\s*(?:require|require_relative|load)\s*\(?\s*['\"]"),
}


# ── Test-case declarations ───────────────────────────────────────────

_JS_TESTS = _compile(
    r"^\s*(?:describe|it|test|context|suite)(?:\.(?:only|skip|each|concurrent|todo))*\s*[(`]",
)

TEST_DECLARATION_PATTERNS: dict[str, tuple[re.Pattern[str], ...]] = {
    "js": _JS_TESTS,
    "ts": _JS_TESTS,
    "py": _compile(
        r"^\s*(?:async\s+)?def\s+test\w*\s*\(",
        r"^\s*class\s+Test\w*\s*[(:]",
    ),
    "java": _compile(r"^\s*@(?:Test|ParameterizedTest|RepeatedTest|TestFactory)\b"),
    "go": _compile(r"^\s*func\s+(?:Test|Benchmark|Fuzz|Example)\w*\s*\("),
    "rust": _compile(r"^\s*#\[(?:cfg\(test\)|(?:\w+::)?test\b|rstest\b)"),
    "ruby": _compile(
        r"^\s*(?:RSpec\.)?(?:describe|context|it|specify)\b\s*[\w('\"{]",
        r"^\s*def\s+test_\w*",
        r"^\s*test\s+['\"]",
    ),
}
