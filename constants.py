#!/usr/bin/env python3
# -*- coding: utf-8 -*-


# Lotería 6 de 49 con cuotas fijas por tamaño de grupo (grupo 1..5)
LOTTERY_6_49_TOTAL = 49  # Números en el bombo
LOTTERY_6_49_SELECTED = 6  # Números extraídos en cada sorteo
LOTTERY_6_49_ODDS = (7.75, 70.00, 700, 8400, 210000)  # Cuota del grupo i+1 por unidad apostada

# Selección de ejemplo: 15 números jugados en sistemas de 1, 2 y 3
EXAMPLE_NUMBERS = (10, 20, 30, 40, 41, 42, 43, 44, 45, 46, 47, 48, 49, 1, 2)
EXAMPLE_SYSTEMS = (1, 2, 3)
EXAMPLE_STAKE = 1.0  # Importe total apostado, se reparte entre todas las apuestas virtuales

# Variables de entorno
ENV_STAKE = 'LOTOBETSLIP_STAKE'  # Sustituye EXAMPLE_STAKE en main.py y en la web api
ENV_LOG_LEVEL = 'LOTOBETSLIP_LOG_LEVEL'  # Nivel de logging de main.py
DEFAULT_LOG_LEVEL = 'WARNING'

# Decimales al mostrar resultados
STAKE_DP = 8
WIN_DP = 2
PROBABILITY_DP = 8
ODDS_DP = 8

# Marcas del bloque de resultados en la salida de main.py
BETSLIP_BEGIN = '===BETSLIP_RESULT_BEGIN==='
BETSLIP_END = '===BETSLIP_RESULT_END==='

# Límites de tamaño de las peticiones a la web api
MAX_LOTTERY_TOTAL = 300  # Números en el bombo (y por tanto números jugados)
MAX_SYSTEMS = 20  # Sistemas distintos por selección
