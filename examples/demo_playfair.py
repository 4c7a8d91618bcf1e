"""
playfair_engine — Live Demo: Key Square, Pairs, Round Trip
==========================================================
Run:  python examples/demo_playfair.py

Walks one message through all four stages, printing the square,
each digraph next to its substitute, and the final text.
"""

import sys, os, logging, time
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from playfair_engine.pipeline                 import PlayfairCipher
from playfair_engine.stages.stage3_substitute import Direction

LINE = "═" * 70
KEY  = "playfair example"
MSG  = "Hide the gold in the tree stump"

def header(stage, name):
    print(f"\n{LINE}")
    print(f"  Stage {stage} — {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

logging.basicConfig(level=logging.INFO, format=' %(message)s')

print(f"\n{LINE}")
print("  playfair_engine — Four-Stage Demo")
print(LINE)
print(f"  Keyword: {KEY}")
print(f"  Message: {MSG}\n")

pf = PlayfairCipher(KEY)

# ── STAGE 1 ──────────────────────────────────────────────────────────────────
header(1, "MATRIX")
for row in str(pf.square).splitlines():
    print(f"     {row}")
ok("Fingerprint", pf.square.fingerprint())

# ── STAGES 2-4 ───────────────────────────────────────────────────────────────
header("2-4", "PAIRS → SUBSTITUTE → ASSEMBLE")
t0  = time.perf_counter()
enc = pf.process(MSG, Direction.ENCRYPT)
dec = pf.process(enc.text, Direction.DECRYPT)
elapsed = time.perf_counter() - t0
for step in enc.steps:
    print(f"  {step.index:>3}  {step}   cells={step.cells}")
ok("Encrypted",  enc.text)
ok("Decrypted",  dec.text)
ok("Round-trip", f"{elapsed*1000:.3f} ms")

# ── RENDER ───────────────────────────────────────────────────────────────────
header("R", "KEY SQUARE IMAGE")
try:
    from playfair_engine.render import KeySquareRenderer
    png = KeySquareRenderer().render(pf.square, highlight=enc.highlight(0))
    ok("PNG", f"{len(png):,} bytes, step 0 highlighted")
except ImportError:
    print("  (Pillow not installed — pip install Pillow)")
    print("  Skipping render demo.")

print(f"\n{LINE}")
print("  Historical cipher. Educational use only.")
print(LINE + "\n")
