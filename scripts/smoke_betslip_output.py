
"""
Comprueba la salida de main.py (ejecutar desde el repo, con el proyecto instalado)

export LOTOBETSLIP_STAKE=1
uv run python scripts/smoke_betslip_output.py

Extrae el bloque entre BETSLIP_BEGIN y BETSLIP_END, lo compara con el boleto
calculado en proceso y muestra su huella.
"""

from __future__ import annotations
import os
import hashlib
import subprocess
import sys

from constants import BETSLIP_BEGIN, BETSLIP_END, ENV_STAKE
from betslip import build_betslip, format_betslip
from betslip.example import example_choice, lottery_6_49


def h16(s: str) -> str:
    return hashlib.sha256(s.encode("utf-8")).hexdigest()[:16]


def extract_block(stdout: str) -> str:
    s = stdout.replace("\r\n", "\n")
    if BETSLIP_BEGIN not in s or BETSLIP_END not in s:
        raise RuntimeError("Betslip markers not found in stdout")
    return s.split(BETSLIP_BEGIN, 1)[1].split(BETSLIP_END, 1)[0].strip()


def expected_block() -> str:
    return format_betslip(build_betslip(lottery_6_49(), example_choice())).strip()


def main() -> int:
    env = dict(os.environ, PYTHONIOENCODING="utf-8")
    env.setdefault(ENV_STAKE, "1")
    os.environ[ENV_STAKE] = env[ENV_STAKE]  # misma apuesta para el cálculo en proceso

    p = subprocess.run([sys.executable, "main.py"], capture_output=True, text=True, env=env)
    if p.returncode != 0:
        print("exit:", p.returncode)
        print("stderr_head:\n", "\n".join((p.stderr or "").splitlines()[:40]))
        return p.returncode

    block = extract_block(p.stdout or "")
    expected = expected_block()
    print("betslip_chars:", len(block))
    print("betslip_hash:", h16(block))
    print("matches_in_process:", block == expected)
    for line in block.splitlines()[:12]:
        print(line)

    return 0 if block == expected else 1


if __name__ == "__main__":
    raise SystemExit(main())
