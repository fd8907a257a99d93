# program/cli.py
import sys, json, argparse
from typing import Any, Dict, List, Optional, Sequence

# ---- Convención array-like ----
from src.protocol.classifier import classify, is_array_like

# ---- Contenedor de referencia ----
from src.runtime.triplet import Triplet

# ---- Consumidores de ejemplo ----
from src.consumers.errors import RejectionReporter
from src.consumers.examplelib import ExampleLib, conforming, compatible

LIBS = {"conforming": conforming, "compatible": compatible}


def _number(text: str) -> Any:
    # int, si no float
    for conv in (int, float):
        try:
            return conv(text)
        except ValueError:
            pass
    raise argparse.ArgumentTypeError(f"no es un número: {text}")

def _serialize_errors(rep: RejectionReporter) -> List[Dict[str, Any]]:
    out = []
    for e in rep.errors:
        out.append({"code": e.code, "message": e.message, "op": e.op})
    return out

def run_lib(lib: ExampleLib, arr: Any) -> List[str]:
    results = [lib.describe_sum(arr), lib.describe_product(arr), lib.describe_reversed(arr)]
    return [r for r in results if r is not None]

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Consumidores de ejemplo de la convención ArrayLike")
    ap.add_argument("values", nargs="*", type=_number, default=[2, 3, 4], help="Elementos (por defecto: 2 3 4)")
    ap.add_argument("--lib", choices=sorted(LIBS), default="conforming", help="Biblioteca consumidora")
    ap.add_argument("--native", action="store_true", help="Pasar un list nativo en vez de un Triplet")
    ap.add_argument("--json", action="store_true", help="Salida JSON (para tools)")
    return ap

def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    values = list(args.values)
    if args.native:
        arr: Any = values
    else:
        if len(values) != Triplet.ARITY:
            ap.error(f"un Triplet necesita exactamente {Triplet.ARITY} valores, recibidos {len(values)}")
        arr = Triplet(*values)

    rep = RejectionReporter()
    lib = LIBS[args.lib](rep)
    results = run_lib(lib, arr)
    code = 0 if not rep.has_errors() else 1

    if args.json:
        payload = {
            "ok": not rep.has_errors(),
            "array_like": is_array_like(arr),
            "kind": str(classify(arr)),
            "results": results,
            "errors": _serialize_errors(rep),
        }
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return code

    # Modo humano (stdout)
    for line in results:
        print(line)
    if rep.has_errors():
        print(rep.summary())
    return code

if __name__ == "__main__":
    sys.exit(main())
