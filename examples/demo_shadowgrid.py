"""
shadowgrid — Live Demo
======================
Run:  python examples/demo_shadowgrid.py [KEYWORD] [MESSAGE]

Builds the grid, encrypts the message, decrypts it again and prints
every intermediate stage.
"""

import sys, os, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from shadowgrid import CipherEngine, EmptyKeywordError

LINE = "═" * 70

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

def indent(block):
    return "\n".join("     " + line for line in block.splitlines())


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG if os.environ.get("DEBUG") else logging.WARNING,
                        format=" %(name)s: %(message)s")

    keyword = sys.argv[1] if len(sys.argv) > 1 else "SHADOW"
    message = sys.argv[2] if len(sys.argv) > 2 else "Meet me at the old mill, Jack."

    engine = CipherEngine()
    try:
        enc = engine.encrypt(keyword, message)
    except EmptyKeywordError as e:
        print(f"  ✗  {e}")
        sys.exit(1)

    header("GRID")
    ok("Keyword", " ".join(enc.grid.keyword) if enc.grid else "")
    if enc.grid:
        print(indent(enc.grid.render()))

    header("ENCRYPT")
    ok("Message", message)
    if enc.is_noop:
        ok("Nothing to encrypt")
        sys.exit(0)
    print(indent(enc.trace.render()))
    ok("Letters used", " ".join(enc.used_letters))

    header("DECRYPT")
    dec = engine.decrypt(keyword, enc.ciphertext)
    print(indent(dec.trace.render()))
    ok("Round-trip", "match" if dec.plaintext == enc.trace.get("J→I").value else "MISMATCH")
    print(LINE + "\n")
