"""
L1 Domain — Product selection handling (pure).

Turns the product prompt answer into a token list and checks it
against a resolved catalog.  No I/O.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable, Mapping

from mpm_installer.core.services.mpm_install.data.products import PRODUCT_SHORTHANDS


def split_products(text: str) -> list[str]:
    """Split a whitespace-delimited product answer into tokens."""
    return text.split()


def expand_shorthands(
    tokens: Iterable[str],
    shorthands: Mapping[str, tuple[str, ...]] = PRODUCT_SHORTHANDS,
) -> list[str]:
    """Replace shorthand tokens with the products they stand for.

    The expansion is fixed: ``parallel_products`` always means MATLAB,
    Parallel_Computing_Toolbox and MATLAB_Parallel_Server, whatever the
    release.  Duplicates are dropped, first occurrence wins.

    Args:
        tokens: Product tokens as typed by the user.
        shorthands: Shorthand token → expansion.

    Returns:
        Ordered, de-duplicated product identifiers.
    """
    expanded: list[str] = []
    seen: set[str] = set()
    for token in tokens:
        for product in shorthands.get(token, (token,)):
            if product not in seen:
                seen.add(product)
                expanded.append(product)
    return expanded


def validate_selection(requested: Iterable[str], catalog: Collection[str]) -> frozenset[str]:
    """Return the requested products that are not in the catalog.

    An empty result means the whole selection is installable.
    """
    return frozenset(requested) - frozenset(catalog)


def shorthands_touching(
    tokens: Iterable[str],
    missing: Collection[str],
    shorthands: Mapping[str, tuple[str, ...]] = PRODUCT_SHORTHANDS,
) -> list[str]:
    """Shorthand tokens whose expansion contributed a missing product.

    Used to explain a rejection such as ``parallel_products`` on a
    release that predates MATLAB_Parallel_Server.
    """
    return [
        token for token in dict.fromkeys(tokens)
        if token in shorthands and any(p in missing for p in shorthands[token])
    ]
