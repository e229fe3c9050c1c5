import pytest


@pytest.fixture
def two_hunk_patch() -> str:
    """Adds computeTotal at new line 10 and removes a log call near new line 20."""
    return "\n".join(
        [
            "diff --git a/src/cart.js b/src/cart.js",
            "index 1a2b3c4..5d6e7f8 100644",
            "--- a/src/cart.js",
            "+++ b/src/cart.js",
            "@@ -8,5 +8,9 @@ const TAX_RATE = 0.2;",
            " const items = [];",
            " ",
            "+function computeTotal(x, y) {",
            "+  return x + y;",
            "+}",
            "+",
            " export function addItem(item) {",
            "   items.push(item);",
            " }",
            "@@ -16,4 +20,3 @@ export function removeItem(id) {",
            "   const index = items.findIndex((i) => i.id === id);",
            '-  console.log("removing", id);',
            "   items.splice(index, 1);",
            " }",
            "",
        ]
    )


@pytest.fixture
def python_test_patch() -> str:
    return "\n".join(
        [
            "--- a/tests/test_cart.py",
            "+++ b/tests/test_cart.py",
            "@@ -1,2 +1,7 @@",
            " import pytest",
            "+from cart import compute_total",
            " ",
            "+",
            "+def test_compute_total():",
            "+    assert compute_total(1, 2) == 3",
            "+",
            "",
        ]
    )
