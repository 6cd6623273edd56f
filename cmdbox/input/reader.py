"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
Escape sequences (arrows and friends) are consumed so their trailing bytes
never leak into text entry as printable characters.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _drain_csi_sequence(fd: int) -> str:
    """Consume a CSI sequence after ``ESC [`` and map arrows to tokens."""
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq == b"A":
        return "UP"
    if seq == b"B":
        return "DOWN"
    if seq == b"C":
        return "RIGHT"
    if seq == b"D":
        return "LEFT"
    # Parameterized sequences (e.g. ``ESC [ 3 ~``) end with a byte in 0x40..0x7e.
    consumed = 0
    while not (0x40 <= seq[0] <= 0x7E):
        seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        consumed += 1
        if seq is None or consumed > 16:
            return "UNKNOWN"
    return "UNKNOWN"


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read one key from ``fd`` and return its token.

    Returns ``""`` when ``timeout_ms`` elapses or the stream is closed.
    Control keys map to ``ESC``, ``BACKSPACE``, ``ENTER_CR``, ``ENTER_LF``,
    ``TAB``, and ``CTRL_C``; everything else decodes to its character.
    """
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""

        ch = os.read(fd, 1)
        if not ch:
            return ""

    if ch == b"\x03":
        return "CTRL_C"
    if ch == b"\t":
        return "TAB"
    if ch in {b"\x08", b"\x7f"}:
        return "BACKSPACE"
    if ch == b"\r":
        return "ENTER_CR"
    if ch == b"\n":
        return "ENTER_LF"

    if ch != b"\x1b":
        return ch.decode("utf-8", errors="replace")

    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq in {b"[", b"O"}:
        return _drain_csi_sequence(fd)
    _PENDING_BYTES.append(seq)
    return "ESC"
