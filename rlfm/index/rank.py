# index/rank.py
import numpy as np


class RankTable:
    """
    Occ checkpoints over a BWT encoded as integer unit codes.

    occ[b, c] holds the number of times code c appears in codes[0 : b * step].
    rank(c, i) is answered from the checkpoint at or below i plus a scan of
    at most step - 1 codes. Both arrays are read-only once built.
    """
    def __init__(self, codes: np.ndarray, sigma: int, step: int = 128):
        self.step = step
        self.sigma = sigma
        self.codes = np.ascontiguousarray(codes, dtype=np.int32)
        self.occ = self._build_occ(self.codes, sigma, step)
        self.codes.setflags(write=False)
        self.occ.setflags(write=False)

    def __len__(self) -> int:
        return int(self.codes.size)

    @staticmethod
    def _build_occ(codes: np.ndarray, sigma: int, step: int) -> np.ndarray:
        n = codes.size
        blocks = n // step + 1
        occ = np.zeros((blocks, sigma), dtype=np.int64)
        for b in range(1, blocks):
            chunk = codes[(b - 1) * step : b * step]
            occ[b] = occ[b - 1] + np.bincount(chunk, minlength=sigma)
        return occ

    def rank(self, code: int, i: int) -> int:
        """Occurrences of code strictly before position i."""
        if i <= 0:
            return 0
        n = self.codes.size
        if i > n:
            i = n
        block = i // self.step
        start = block * self.step
        base = int(self.occ[block, code])
        if start == i:
            return base
        return base + int(np.count_nonzero(self.codes[start:i] == code))

    def counts(self) -> np.ndarray:
        """Total occurrences of every code over the whole sequence."""
        n = self.codes.size
        block = n // self.step
        tail = np.bincount(self.codes[block * self.step :], minlength=self.sigma)
        return self.occ[block] + tail
