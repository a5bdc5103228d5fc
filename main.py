#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import logging
import os

from constants import BETSLIP_BEGIN, BETSLIP_END, DEFAULT_LOG_LEVEL, ENV_LOG_LEVEL
from betslip import betslip_to_frame, build_betslip, format_betslip, format_choice, format_lottery
from betslip.example import example_choice, lottery_6_49


def main():
    """
    Calcula y muestra el boleto de ejemplo: lotería 6/49, 15 números jugados en
    sistemas de 1, 2 y 3.
    :return: 0 si Todo es correcto
    """
    logging.basicConfig(level=os.environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    loteria = lottery_6_49()
    seleccion = example_choice()
    boleto = build_betslip(loteria, seleccion)

    print(format_lottery(loteria))
    print()
    print(format_choice(seleccion))
    print()

    # El bloque entre marcas es lo que compara scripts/smoke_betslip_output.py
    print(BETSLIP_BEGIN)
    print(format_betslip(boleto))
    print(BETSLIP_END)

    print(f"\nRESUMEN POR ACIERTOS\n"
          f"********************\n"
          f"{betslip_to_frame(boleto).to_string(index=False)}")

    return 0


if __name__ == '__main__':
    raise SystemExit(main())
