"""
Cologne phonetics (Kölner Phonetik, Hans Joachim Postel, 1969).

Maps German words to digit strings. A letter's digit depends on its
neighbours; repeated digits collapse and ``0`` is only kept in first place.
"""

from .encoder import Encoder

CHAR_IGNORE = "-"

AEIJOUY = "AEIJOUY"
CSZ = "CSZ"
FPVW = "FPVW"
GKQ = "GKQ"
CKQ = "CKQ"
AHKLOQRUX = "AHKLOQRUX"
SZ = "SZ"
AHKOQUX = "AHKOQUX"
DTX = "DTX"

_UMLAUTS = str.maketrans({"Ä": "A", "Ü": "U", "Ö": "O"})


class _CologneOutput:
    def __init__(self):
        self.last_code = "/"
        self.chars = []

    def put(self, code: str) -> None:
        if code != CHAR_IGNORE and self.last_code != code and (code != "0" or not self.chars):
            self.chars.append(code)
        self.last_code = code

    def is_empty(self) -> bool:
        return not self.chars

    def __str__(self) -> str:
        return "".join(self.chars)


class ColognePhonetic(Encoder):
    def encode(self, value: str) -> str:
        if not value:
            return ""
        text = value.upper().translate(_UMLAUTS)
        output = _CologneOutput()
        last_char = CHAR_IGNORE
        for i, ch in enumerate(text):
            if not ("A" <= ch <= "Z"):
                continue
            next_char = text[i + 1] if i + 1 < len(text) else CHAR_IGNORE

            if ch in AEIJOUY:
                output.put("0")
            elif ch == "B" or (ch == "P" and next_char != "H"):
                output.put("1")
            elif ch in "DT" and next_char not in CSZ:
                output.put("2")
            elif ch in FPVW:
                output.put("3")
            elif ch in GKQ:
                output.put("4")
            elif ch == "X" and last_char not in CKQ:
                output.put("4")
                output.put("8")
            elif ch in SZ:
                output.put("8")
            elif ch == "C":
                if output.is_empty():
                    output.put("4" if next_char in AHKLOQRUX else "8")
                elif last_char in SZ or next_char not in AHKOQUX:
                    output.put("8")
                else:
                    output.put("4")
            elif ch in DTX:
                output.put("8")
            elif ch == "R":
                output.put("7")
            elif ch == "L":
                output.put("5")
            elif ch in "MN":
                output.put("6")
            elif ch == "H":
                output.put(CHAR_IGNORE)
            last_char = ch
        return str(output)
