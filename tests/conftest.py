import io

import pytest


SMALL_WORDS = "bad bat bag big bug"

FOUR_LETTER_WORDS = """
able bake bale bead bear beat been beer bell belt bend best bike bile bind
bird bite blue boat bold bone book boot born both bowl bulb bull burn bust
cake call calm came cape card care cart case cash cast cave cell chat chin
chip city clay club coal coat code cold cole cone cook cool cope copy cord
core cork corn cost cove crab crew crop crow cube cure curl cute dale dame
dare dark darn dart dash data date dawn deal dear debt deck deep deer desk
dial dice diet dine dirt dish dive dock dome done door dose dove down drag
draw drew drip drop drum dual duck dull dune dusk dust duty
"""


@pytest.fixture
def small_source():
    return io.StringIO(SMALL_WORDS)


@pytest.fixture
def dictionary_file(tmp_path):
    path = tmp_path / "dictionary.txt"
    path.write_text("BAD\nbat bag\n  big\tbug\nbad apple it a\n", encoding="utf-8")
    return path


@pytest.fixture
def four_letter_source():
    return io.StringIO(FOUR_LETTER_WORDS)
