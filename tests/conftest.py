import pytest

UNARY_INCREMENT = """\
start: q0
accept: qA
reject: qR
blank: B
q0 1 -> q0 1 >
q0 B -> qA 1 ^
"""

EVEN_LENGTH = """\
# accepts binary words of even length
start: q0
accept: qA
reject: qR
blank: _
q0 0 -> q1 0 >
q0 1 -> q1 1 >
q1 0 -> q0 0 >
q1 1 -> q0 1 >
q0 _ -> qA _ ^
q1 _ -> qR _ ^
"""

LOOPING = """\
start: q0
accept: qA
reject: qR
blank: B
q0 B -> q0 B ^
"""


@pytest.fixture
def machine_file(tmp_path):
    """Write a machine description to a temporary file and return its path."""
    def write(text, name="machine.txt"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return write
