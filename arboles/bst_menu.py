"""Interactive menu over a binary search tree of integers."""

from __future__ import annotations

import sys
from typing import Any, Iterable, Optional, TextIO

from .bst import BinarySearchTree, DuplicateKeyError, EmptyTreeError, KeyNotFoundError

MENU = (
    "\tMENU DE OPCIONES - ARBOLES BINARIO\n"
    "1.- Insertar nodo (insertaNodo)\n"
    "2.- Insertar nodo (insertaNodo2)\n"
    "3.- Insertar nodo (InsertarNodoIteterativo)\n"
    "4.- Mostrar arbol (forma estructurada)\n"
    "5.- Recorrido en Preorden\n"
    "6.- Recorrido en Inorden\n"
    "7.- Recorrido en Posorden\n"
    "8.- Buscar dato(busquedaABB)\n"
    "9.- Buscar dato(busquedaABB2)\n"
    "10.- Buscar dato(busquedaIterativa)\n"
    "11.- Altura del arbol\n"
    "12.- Contar todos los nodos\n"
    "13.- Contar nodos hojas\n"
    "14.- Maximo valor\n"
    "15.- Minimo Valor\n"
    "16.- EliminarABB\n"
    "17.- Remover Raiz\n"
    "18.- Podar Arbol(eliminar todo los nodos)\n"
    "SALIR\n"
)

_CLEAR_SCREEN = "\033[2J\033[H"


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


def _is_tty(stream: Any) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def _values_line(values: Iterable[Any]) -> str:
    return "".join(f"{value} " for value in values)


def run_menu(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
    """Run the menu until option 0 is chosen or the input runs out."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    write = stdout.write
    reader = _TokenReader(stdin)
    interactive = _is_tty(stdin) and _is_tty(stdout)
    bst = BinarySearchTree()

    def clear() -> None:
        if interactive:
            write(_CLEAR_SCREEN)

    def pause() -> None:
        if interactive:
            write("Presione Enter para continuar . . .")
            stdout.flush()
            stdin.readline()

    def ask(prompt: str) -> int:
        write(prompt)
        return reader.read_int()

    def when_not_empty(message: str, text: str) -> None:
        write(message if not bst else text)

    try:
        while True:
            clear()
            write(MENU)
            option = ask("Ingrese la opcion: ")
            if option == 0:
                write("Saliendo del programa....\n")
                return
            if not 1 <= option <= 18:
                write("Opcion invalida. Intente nuevamente.\n")
                continue
            clear()
            match option:
                case 1:
                    key = ask("Ingrese dato a insertar (insertarNodo): ")
                    try:
                        bst.insert(key)
                    except DuplicateKeyError:
                        write(f"El nodo {key} ya se encuentra en el arbol.\n")
                case 2:
                    key = ask("Ingrese dato a insertar (insertaNodo2): ")
                    try:
                        bst.insert(key)
                    except DuplicateKeyError:
                        write("La informacion ya se encuentra en el arbol.\n")
                case 3:
                    bst.insert_iterative(ask("Ingrese dato a insertar (insertarNodoIterativo): "))
                case 4:
                    when_not_empty("El arbol esta vacia\n", bst.render() if bst else "")
                case 5:
                    when_not_empty(
                        "El arbol esta vacia\n",
                        f"Recorrido Preorden: {_values_line(bst.preorder())}\n",
                    )
                case 6:
                    when_not_empty(
                        "El arbol esta vacia\n",
                        f"Recorrido Inorden: {_values_line(bst)}\n",
                    )
                case 7:
                    when_not_empty(
                        "El arbol esta vacia\n",
                        f"Recorrido Posorden: {_values_line(bst.postorder())}\n",
                    )
                case 8:
                    key = ask("Ingrese el dato a buscar: ")
                    if key in bst:
                        write("La informacion esta en el arbol\n")
                    else:
                        write("La informacion no se encuentra en el arbol\n")
                case 9:
                    key = ask("Ingrese el dato a buscar: ")
                    if key in bst:
                        write("Dato encontrado en el arbol.\n")
                    else:
                        write("Dato NO encontrado.\n")
                case 10:
                    key = ask("Ingrese el dato a buscar: ")
                    if key in bst:
                        write("La informacion se encuentra en el arbol\n")
                    else:
                        write("La informacion No se encuentra en el arbol\n")
                case 11:
                    when_not_empty(
                        "El arbol esta vacio.\n", f"Altura del arbol: {bst.height()}\n"
                    )
                case 12:
                    when_not_empty(
                        "El arbol esta vacio.\n", f"Cantidad total de nodos: {len(bst)}\n"
                    )
                case 13:
                    if not bst:
                        write("El arbol esta vacio.\n")
                    else:
                        found = list(bst.leaves())
                        for leaf in found:
                            write(f"Hoja encontrada: {leaf}\n")
                        write(f"Cantidad total de nodos HOJA: {len(found)}\n")
                case 14:
                    try:
                        write(f"VALOR MAXIMO: {bst.maximum()}\n")
                    except EmptyTreeError:
                        write("El arbol esta vacio.\n")
                case 15:
                    try:
                        write(f"VALOR MINIMO: {bst.minimum()}\n")
                    except EmptyTreeError:
                        write("El arbol esta vacio.\n")
                case 16:
                    key = ask("Ingrese el dato a eliminar: ")
                    try:
                        bst.delete(key)
                    except KeyNotFoundError:
                        write("La informacion a eliminar no se encuentra en el arbol\n")
                case 17:
                    if not bst:
                        write("Arbol binario vacio\n")
                    else:
                        bst.remove_root()
                        write("Raiz removida correctamente\n")
                case 18:
                    bst.clear()
                    write("ELIMINADOS CORRECTAMENTE\n")
            pause()
    except _InputEnded:
        return


def main(argv: Optional[list[str]] = None) -> int:
    """Start the interactive menu on the standard streams."""
    run_menu(sys.stdin, sys.stdout)
    return 0