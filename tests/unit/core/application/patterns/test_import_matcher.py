"""Unit tests — match_imports."""

import pytest
from structlog.testing import capture_logs

from diff_insight.core.application.patterns import match_imports
from diff_insight.core.domain.analysis import DiffLine


def _added(*contents: str) -> list[DiffLine]:
    return [DiffLine(number, content) for number, content in enumerate(contents, start=1)]


class TestMatchImports:
    @pytest.mark.parametrize(
        ("language", "line"),
        [
            ("js", "import React from 'react';"),
            ("js", "import { useMemo, useState } from \"react\";"),
            ("js", "import './styles.css';"),
            ("js", "const fs = require('fs');"),
            ("ts", "import type { Request } from 'express';"),
            ("ts", "export * from './models';"),
            ("py", "import os"),
            ("py", "from typing import Any"),
            ("py", "from . import views"),
            ("java", "import java.util.List;"),
            ("java", "import static org.junit.Assert.*;"),
            ("go", 'import "fmt"'),
            ("go", "import ("),
            ("go", '"net/http"'),
            ("go", 'chi "github.com/go-chi/chi/v5"'),
            ("go", '_ "github.com/lib/pq"'),
            ("rust", "use std::collections::HashMap;"),
            ("rust", "extern crate serde;"),
            ("ruby", "require 'json'"),
            ("ruby", 'require_relative "support/helpers"'),
        ],
    )
    def test_detects_dependency_statements(self, language: str, line: str) -> None:
        result = match_imports(_added(line), language)

        assert result.lines == (line,)
        assert result.line_numbers == (1,)

    @pytest.mark.parametrize(
        ("language", "line"),
        [
            ("js", "console.log('import failed');"),
            ("py", "important = True"),
            ("py", "print('from x import y')"),
            ("java", "String importPath = base;"),
            ("rust", "let used = true;"),
            ("go", 'return "net/http"'),
            ("go", 'names := []string{"a", "b"}'),
        ],
    )
    def test_ignores_lookalikes(self, language: str, line: str) -> None:
        assert match_imports(_added(line), language).lines == ()

    def test_keeps_order_and_strips_indentation(self) -> None:
        lines = _added("    import sys", "x = 1", "from pathlib import Path")

        result = match_imports(lines, "py")

        assert result.lines == ("import sys", "from pathlib import Path")
        assert result.line_numbers == (1, 3)

    def test_unsupported_language_is_explicit(self) -> None:
        with capture_logs() as logs:
            result = match_imports(_added("#include <stdio.h>"), "c")

        assert result.language_supported is False
        assert result.lines == ()
        assert logs[0]["matcher"] == "imports"
        assert logs[0]["log_level"] == "warning"
