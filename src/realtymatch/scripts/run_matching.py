"""
Script para ejecutar el matching desde la línea de comandos.

Uso:
    python -m realtymatch.scripts.run_matching --requirement <ID>
    python -m realtymatch.scripts.run_matching --property <ID> --min-score 70
    python -m realtymatch.scripts.run_matching --batch --demo
"""

import argparse
import json
import sys
from typing import Optional

import structlog

from realtymatch.exceptions import NotFoundError
from realtymatch.logging_setup import configure_logging
from realtymatch.matching import Catalog, MatchEngine

logger = structlog.get_logger()


def _build_catalog(demo: bool) -> Catalog:
    if demo:
        from realtymatch.demo import build_demo_catalog

        return build_demo_catalog()

    from realtymatch.database import SupabaseCatalog

    return SupabaseCatalog()


def _parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Matching de requerimientos y propiedades")
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("--requirement", help="ID del requerimiento a matchear")
    mode.add_argument("--property", help="ID de la propiedad (dirección inversa)")
    mode.add_argument(
        "--batch",
        action="store_true",
        help="Conteo de matches para todos los requerimientos activos",
    )
    parser.add_argument("--min-score", type=int, default=None, help="Score mínimo (0-100)")
    parser.add_argument("--limit", type=int, default=None, help="Máximo de resultados (1-100)")
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Usar el catálogo de ejemplo en memoria en lugar de Supabase",
    )
    parser.add_argument("--log-level", default=None, help="Nivel de logging")
    return parser.parse_args(argv)


def run_matching(args: argparse.Namespace) -> dict:
    """Ejecuta el modo pedido y devuelve el resultado serializable."""
    engine = MatchEngine(catalog=_build_catalog(args.demo))

    if args.batch:
        requirement_ids = [r.id for r in engine.catalog.get_active_requirements()]
        counts = engine.count_matches_batch(requirement_ids, min_score=args.min_score)
        return {
            "counts": [
                {"requirement_id": c.requirement_id, "count": c.count, "error": c.error}
                for c in counts
            ],
            "errors": sum(1 for c in counts if c.error),
        }

    if args.property:
        matches = engine.find_matches_for_property(
            args.property, min_score=args.min_score, limit=args.limit
        )
    else:
        matches = engine.find_best_matches(
            args.requirement, min_score=args.min_score, limit=args.limit
        )

    return {
        "matches": [m.to_dict() for m in matches],
        "total": len(matches),
        "errors": 0,
    }


def main(argv: Optional[list[str]] = None):
    """Entry point del script."""
    args = _parse_args(argv)
    configure_logging(args.log_level)

    try:
        result = run_matching(args)
        print(json.dumps(result, indent=2, ensure_ascii=False, default=str))
        sys.exit(0 if result.get("errors", 0) == 0 else 1)

    except NotFoundError as e:
        logger.error("No encontrado", entity=e.entity, id=e.identifier)
        sys.exit(2)
    except KeyboardInterrupt:
        logger.info("Matching interrumpido por usuario")
        sys.exit(130)
    except Exception as e:
        logger.error("Error fatal en matching", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
