import pytest


@pytest.fixture
def leucine():
    """Heavy-atom trace of a leucine residue: N, CA, C, O, CB, CG, CD1, CD2 (Angstrom)."""
    return [
        (24.969, 13.428, 30.692),
        (24.044, 12.661, 29.808),
        (22.785, 13.482, 29.543),
        (21.951, 13.670, 30.431),
        (23.672, 11.328, 30.466),
        (22.881, 10.326, 29.620),
        (23.691, 9.935, 28.389),
        (22.557, 9.096, 30.459),
    ]
