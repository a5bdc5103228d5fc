from __future__ import annotations

import pytest

from betslip import (Betslip, LotteryConfig, PlayerChoice, betslip_to_frame, build_betslip,
                     format_betslip, format_choice, format_hit, format_lottery)
from betslip.frame import FRAME_COLUMNS


def test_format_lottery(lottery):
    txt = format_lottery(lottery)
    assert "6/49 (13983816)" in txt
    assert "1=7.75, 2=70, 3=700, 4=8400, 5=210000" in txt


def test_format_choice(choice):
    txt = format_choice(choice)
    assert "- números: 01 02 10 20 30 40 41 42 43 44 45 46 47 48 49" in txt
    assert "1=1/15 (15), 2=2/15 (105), 3=3/15 (455)" in txt
    assert "- apuestas virtuales: 575" in txt


def test_format_hit(lottery, choice):
    line = format_hit(build_betslip(lottery, choice).outcome_for(3))
    assert line.startswith("HIT=3, Stake=0.00173913, WIN=1.62,")
    assert "Winning Comb. Total=7" in line
    assert "{3/3 (1) odd: 700.0}" in line
    assert "probability=1.76504039%" in line


def test_format_betslip(lottery, choice):
    txt = format_betslip(build_betslip(lottery, choice))
    hit_lines = [line for line in txt.splitlines() if line.startswith("HIT=")]
    assert [line.split(",")[0] for line in hit_lines] == [f"HIT={h}" for h in range(1, 7)]


def test_format_empty_betslip():
    assert "ningún acierto" in format_betslip(Betslip(()))


def test_frame(lottery, choice):
    df = betslip_to_frame(build_betslip(lottery, choice))
    assert list(df.columns) == FRAME_COLUMNS
    assert df["hit"].tolist() == [1, 2, 3, 4, 5, 6]
    row = df[df["hit"] == 3].iloc[0]
    assert row["winning_comb_total"] == 7
    assert row["win"] == pytest.approx(933.25 / 575)
    assert row["probability_pct"] == pytest.approx(1.76504039, rel=1e-8)


def test_frame_empty():
    df = betslip_to_frame(Betslip(()))
    assert df.empty
    assert list(df.columns) == FRAME_COLUMNS


def test_format_keeps_large_values():
    cfg = LotteryConfig(49, 6, {1: 1234567.25})
    choice = PlayerChoice.with_systems((7,), 1234567.0, (1,))
    assert "1=1234567.25" in format_lottery(cfg)
    assert "- apuesta: 1234567.0" in format_choice(choice)
    line = format_hit(build_betslip(cfg, choice).outcome_for(1))
    assert "offeredOdds=1234567.25" in line
    assert "e+" not in line
