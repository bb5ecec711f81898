import sys
import json
import argparse
import logging

from pydantic import ValidationError

from minisem.ast_nodes import create_tree_image, render_ascii
from minisem.semantic.analyzer import SemanticAnalyzer
from minisem.tree_schema import load_tree

log = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="minisem",
        description="Análisis semántico y métricas de un árbol de programa ya parseado (JSON).",
    )
    p.add_argument("tree", help="archivo JSON con el árbol del programa")
    p.add_argument("--ast", action="store_true", help="imprime el árbol antes de analizarlo")
    p.add_argument("--tree-image", metavar="BASENAME", help="exporta el árbol con graphviz")
    p.add_argument("--symbols", action="store_true", help="imprime la tabla de símbolos si el análisis es correcto")
    p.add_argument("--json", action="store_true", help="imprime las métricas en JSON")
    p.add_argument("--log-level", default="WARNING", help="nivel de logging (por defecto: WARNING)")
    return p


def main(argv=None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s:%(name)s:%(message)s")

    # === FASE 1: ÁRBOL ===
    try:
        with open(args.tree, encoding="utf-8") as f:
            tree = load_tree(f.read())
    except (OSError, ValidationError) as e:
        print(f"[ERROR] No se pudo leer el árbol {args.tree}: {e}", file=sys.stderr)
        return 2
    log.info("tree loaded from %s", args.tree)

    if args.ast:
        print("== AST ==")
        print(render_ascii(tree))

    if args.tree_image:
        path = create_tree_image(tree, out_basename=args.tree_image, fmt="png")
        print(f"[OK] AST exportado a: {path}")

    # === FASE 2: SEMÁNTICO + MÉTRICAS ===
    analyzer = SemanticAnalyzer()
    try:
        result = analyzer.analyze(tree)
    except ValueError as e:
        print(f"[ERROR] Árbol mal formado: {e}", file=sys.stderr)
        return 2

    if not result.ok:
        print("== ERRORES SEMÁNTICOS ==")
        for e in result.errors:
            print("•", e)
        return 1

    if args.json:
        print(json.dumps(result.metrics.as_dict()))
    else:
        print(result.metrics.format())

    if args.symbols:
        print("== SÍMBOLOS ==")
        for entry in analyzer.table.serialize():
            print(f"{entry['name']}: {entry['type']}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
