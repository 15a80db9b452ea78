"""IPCrypt mixing rounds.

``fwd`` is one add-rotate-xor round over the four lanes of the state and
``bwd`` is its exact inverse. Each step uses the lane values left by the
previous step, so the order below is part of the cipher definition.
"""

from ipcrypt.cipher.lanes import add8, rotl8, sub8
from ipcrypt.cipher.state import State


def fwd(state: State) -> State:
    """Forward round.

    Args:
        state: Lanes (b0, b1, b2, b3), each in [0, 256)

    Returns:
        Mixed lanes (b0, b1, b2, b3)
    """
    b0, b1, b2, b3 = state

    b0 = add8(b0, b1)
    b2 = add8(b2, b3)
    b1 = rotl8(b1, 2)
    b3 = rotl8(b3, 5)
    b1 ^= b0
    b3 ^= b2
    b0 = rotl8(b0, 4)

    b0 = add8(b0, b3)
    b2 = add8(b2, b1)
    b1 = rotl8(b1, 3)
    b3 = rotl8(b3, 7)
    b1 ^= b2
    b3 ^= b0
    b2 = rotl8(b2, 4)

    return (b0, b1, b2, b3)


def bwd(state: State) -> State:
    """Backward round, undoing ``fwd`` step by step.

    Left rotation by 8 - r stands in for right rotation by r.

    Args:
        state: Lanes (b0, b1, b2, b3), each in [0, 256)

    Returns:
        Lanes (b0, b1, b2, b3) such that fwd() of them equals ``state``
    """
    b0, b1, b2, b3 = state

    b2 = rotl8(b2, 4)
    b1 ^= b2
    b3 ^= b0
    b1 = rotl8(b1, 5)
    b3 = rotl8(b3, 1)
    b0 = sub8(b0, b3)
    b2 = sub8(b2, b1)

    b0 = rotl8(b0, 4)
    b1 ^= b0
    b3 ^= b2
    b1 = rotl8(b1, 6)
    b3 = rotl8(b3, 3)
    b0 = sub8(b0, b1)
    b2 = sub8(b2, b3)

    return (b0, b1, b2, b3)
