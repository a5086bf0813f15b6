"""Predicados de classe CSS e busca de ancestrais usados pelos scrapers.

Os dois predicados são políticas distintas e não devem ser unificados:
``class_contains_substring`` procura o marcador dentro do atributo ``class``
bruto (``"parbase-extra"`` casa com ``"parbase"``), enquanto
``class_list_has_exact`` exige o token exato na lista de classes.
"""

from __future__ import annotations

from gazet_core.domain.contracts import TreeNode

# Limite de segurança para a subida na árvore.
MAX_ANCESTOR_DEPTH = 512


def class_contains_substring(node: TreeNode | None, marker: str) -> bool:
    """Indica se o atributo ``class`` bruto do nó contém ``marker``.

    Um nó ausente é tratado como atributo vazio.
    """

    if node is None:
        return False
    return marker in node.class_name


def class_list_has_exact(node: TreeNode | None, marker: str) -> bool:
    """Indica se ``marker`` é um dos tokens da lista de classes do nó."""

    if node is None:
        return False
    return marker in node.class_names


def find_ancestor(node: TreeNode, marker: str) -> TreeNode | None:
    """Retorna o ancestral estrito mais próximo com a classe ``marker``.

    A busca começa no pai imediato e nunca considera o próprio nó.
    """

    current = node.parent_element
    depth = 0
    while current is not None and depth < MAX_ANCESTOR_DEPTH:
        if class_list_has_exact(current, marker):
            return current
        current = current.parent_element
        depth += 1
    return None


__all__ = [
    "MAX_ANCESTOR_DEPTH",
    "class_contains_substring",
    "class_list_has_exact",
    "find_ancestor",
]
