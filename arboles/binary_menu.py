"""Interactive menu that builds a binary tree by hand and inspects it."""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterable, Optional, TextIO

from . import tree
from .tree import Node

MENU = (
    "\n-----MENU DE OPCIONES- ARBOL BINARIO-------\n"
    "1.- Crear arbol\n"
    "2.- Mostrar arbol (forma estructurada)\n"
    "3.-Recorrido en Preorden\n"
    "4.-Recorrido en Inorden\n"
    "5.-Recorrido en Posorden\n"
    "6.-Altura del arbol\n"
    "7.-Contar todos los nodos\n"
    "8.- Contar nodos hoja\n"
    "9.- Verifica si el arbol esta completo\n"
    "0.- SALIR\n"
)

EMPTY_TREE = "El arbol esta vacio\n"


class _InputEnded(Exception):
    """No further integer can be read from the input."""


class _TokenReader:
    """Reads whitespace-separated integers from a text stream."""

    def __init__(self, stream: Iterable[str]) -> None:
        self._tokens = (token for line in stream for token in line.split())

    def read_int(self) -> int:
        token = next(self._tokens, None)
        if token is None:
            raise _InputEnded
        try:
            return int(token)
        except ValueError:
            raise _InputEnded from None


def read_tree(
    ask_value: Callable[[], Any], ask_yes_no: Callable[[str], bool]
) -> Node:
    """Build a tree in preorder from answers to questions.

    ``ask_value()`` gives the value of the current node; ``ask_yes_no(side)``
    is asked with ``"izquierda"`` and then ``"derecha"`` and says whether
    that child exists.
    """
    value = ask_value()
    left = read_tree(ask_value, ask_yes_no) if ask_yes_no("izquierda") else None
    right = read_tree(ask_value, ask_yes_no) if ask_yes_no("derecha") else None
    return Node(value, left, right)


def _values_line(values: Iterable[Any]) -> str:
    return "".join(f"{value} " for value in values)


def run_menu(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
    """Run the menu until option 0 is chosen or the input runs out."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    write = stdout.write
    reader = _TokenReader(stdin)
    root: Optional[Node] = None

    def ask_value() -> int:
        write("\nIngrese el valor del nodo: ")
        return reader.read_int()

    def ask_yes_no(side: str) -> bool:
        write(f"\nExiste nodo por {side} 1(SI) - 0(NO)? ")
        return reader.read_int() == 1

    try:
        while True:
            write(MENU)
            write("Ingrese una opcion: ")
            option = reader.read_int()
            if option == 0:
                write("Saliendo del programa....\n")
                return
            if option == 1:
                root = read_tree(ask_value, ask_yes_no)
            elif option == 9:
                answer = "SI" if tree.is_complete(root) else "NO"
                write(f"Esta completo ? {answer}\n")
            elif option in range(2, 9):
                if root is None:
                    write(EMPTY_TREE)
                    continue
                match option:
                    case 2:
                        write(tree.render(root))
                    case 3:
                        write(f" Recorrido Preorden: {_values_line(tree.preorder(root))}\n")
                    case 4:
                        write(f" Recorrido Inorden: {_values_line(tree.inorder(root))}\n")
                    case 5:
                        write(f" Recorrido Posorden: {_values_line(tree.postorder(root))}\n")
                    case 6:
                        write(f"Altura del arbol: {tree.height(root)}\n")
                    case 7:
                        write(f"Cantidad total de nodos: {tree.count_nodes(root)}\n")
                    case 8:
                        found = list(tree.leaves(root))
                        for leaf in found:
                            write(f"Hoja encontrada: {leaf}\n")
                        write(f"Cantidad de nodos hoja: {len(found)}\n")
            else:
                write("Opcion invalida. Intente nuevamente.\n")
    except _InputEnded:
        return


def main(argv: Optional[list[str]] = None) -> int:
    """Start the interactive menu on the standard streams."""
    run_menu(sys.stdin, sys.stdout)
    return 0