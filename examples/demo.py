"""diffson demo — resolve JSON Pointers with strict and lenient recovery."""

import diffson

doc = {
    "name": "Alex",
    "skills": ["Python", "Rust"],
    "address": {"city": "Lisbon"},
    "a/b": "escaped key",
}

# ── 1. Strict lookup (the default) ──────────────────────────────────

strict = diffson.JsonPointer()
print("1) strict lookup")
print(f"   /skills/1   -> {strict.evaluate(doc, '/skills/1')!r}")
print(f"   /a~1b       -> {strict.evaluate(doc, '/a~1b')!r}")
try:
    strict.evaluate(doc, "/skills/-")
except diffson.PointerResolutionError as exc:
    print(f"   /skills/-   -> {type(exc).__name__}: {exc}")
print()


# ── 2. Lenient lookup: treat anything missing as null ───────────────

lenient = diffson.JsonPointer(diffson.ConstantPolicy(None))
print("2) missing-as-null")
print(f"   /address/zip   -> {lenient.evaluate(doc, '/address/zip')!r}")
print(f"   /skills/9/name -> {lenient.evaluate(doc, '/skills/9/name')!r}")
print()


# ── 3. Partial handler: only the append marker is tolerated ─────────


def append_slot(node, segment):
    if isinstance(node, list) and segment == diffson.APPEND_MARKER:
        return None
    return diffson.UNHANDLED


patching = diffson.JsonPointer(append_slot)
print("3) partial handler")
print(f"   /skills/-  -> {patching.evaluate(doc, '/skills/-')!r}")
try:
    patching.evaluate(doc, "/skills/7")
except diffson.PointerResolutionError as exc:
    print(f"   /skills/7  -> {type(exc).__name__}: {exc}")
print()


# ── 4. Building pointers ────────────────────────────────────────────

ptr = diffson.Pointer.root().child("a/b").child("m~n").child(0)
print("4) building pointers")
print(f"   segments={ptr.segments}  text={str(ptr)!r}")
print(f"   parsed back: {diffson.parse_pointer(str(ptr)) == ptr}")
print()


# ── 5. Raw JSON text ────────────────────────────────────────────────

raw = '{"items": [10, 20, 30]}'
print("5) raw document")
print(f"   {strict.evaluate_json(raw, '/items/2')!r}")
