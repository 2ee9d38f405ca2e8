"""
Shared Netpbm (PGM / PPM) grammar helpers.

This module provides:
    • read_line(fp)
    • skip_comment_lines(fp)
    • parse_dimensions(line)
    • allocate_samples(count)
    • fill_text_samples(body, samples)
    • fill_binary_samples(body, samples)
    • report_failure(logger, kind, message, path)

Sample filling follows the same rule for both encodings: every token / byte
in the body is counted, but only the first len(samples) are stored, so the
buffer is never indexed past its end. Callers compare the returned count
against the expected one.
"""

import logging
import re
from typing import BinaryIO, Optional, Tuple

import numpy as np

from models.result import CodecResult, ErrorKind

INT_PREFIX = re.compile(rb"[+-]?\d+")


# -------------------------------------------------------------------------
#  HEADER
# -------------------------------------------------------------------------

def read_line(fp: BinaryIO) -> bytes:
    """
    Reads one header line including its newline; b"" at end of file.
    """
    return fp.readline()


def skip_comment_lines(fp: BinaryIO) -> bytes:
    """
    Reads lines until one does not start with '#', and returns it.
    """
    line = read_line(fp)
    while line.startswith(b"#"):
        line = read_line(fp)
    return line


def parse_dimensions(line: bytes) -> Optional[Tuple[int, int]]:
    """
    Parses "<width> <height>". Extra trailing tokens are ignored.

    Returns None if the line does not start with two integers.
    """
    tokens = line.split()
    if len(tokens) < 2:
        return None
    try:
        return int(tokens[0]), int(tokens[1])
    except ValueError:
        return None


# -------------------------------------------------------------------------
#  SAMPLES
# -------------------------------------------------------------------------

def allocate_samples(count: int) -> np.ndarray:
    """
    Allocates an uint8 sample buffer; raises MemoryError on failure.

    numpy reports sizes it cannot represent as ValueError / OverflowError;
    those are failed allocations too.
    """
    if count <= 0:
        raise MemoryError(f"cannot allocate a buffer of {count} samples")
    try:
        return np.zeros(count, dtype=np.uint8)
    except (ValueError, OverflowError) as exc:
        raise MemoryError(f"cannot allocate a buffer of {count} samples") from exc


def fill_text_samples(body: bytes, samples: np.ndarray) -> int:
    """
    ASCII variant: whitespace-delimited decimal tokens.

    Reading stops at the first token that does not start with an integer.
    A token with an integer prefix ("12abc") contributes that integer and
    then ends the stream, as scanf("%d") would. Values are truncated to
    8 bits (as an unsigned char cast would).
    """
    limit = samples.size
    count = 0

    for token in body.split():
        m = INT_PREFIX.match(token)
        if m is None:
            break

        if count < limit:
            samples[count] = int(m.group(0)) & 0xFF
        count += 1

        if m.end() != len(token):
            break

    return count


def fill_binary_samples(body: bytes, samples: np.ndarray) -> int:
    """
    Raw variant: one byte per sample.
    """
    stored = min(len(body), samples.size)
    samples[:stored] = np.frombuffer(body, dtype=np.uint8, count=stored)
    return len(body)


# -------------------------------------------------------------------------
#  DIAGNOSTICS
# -------------------------------------------------------------------------

def report_failure(logger: logging.Logger, kind: ErrorKind, message: str, path) -> CodecResult:
    """
    Logs the diagnostic to the error stream and wraps it in a failed result.
    """
    logger.error("%s: %s", path, message)
    return CodecResult.failure(kind, message, path)
