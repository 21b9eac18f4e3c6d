import numpy as np
import pytest

from boxgame.rules.fsm import GameEngine


def test_e2e_random_tokens_invariants():
    rng = np.random.default_rng(0)
    tokens = [int(t) for t in rng.integers(0, 30, size=101)]
    eng = GameEngine(tokens)
    absorbed = {i: [] for i in range(4)}
    initial = eng.box_set.weights()
    results = []
    while eng.remaining:
        weights = eng.box_set.weights()
        rec = eng.step()
        # lightest box chosen, ties to the earliest
        assert weights[rec.box_index] == min(weights)
        assert rec.box_index == weights.index(min(weights))
        absorbed[rec.box_index].append(rec.token)
        seen = absorbed[rec.box_index]
        if rec.box_kind == "green":
            last = seen[-3:]
            assert rec.result == pytest.approx((sum(last) / len(last)) ** 2)
        else:
            lo, hi = min(seen), max(seen)
            assert rec.result == pytest.approx((lo + hi) * (lo + hi + 1) / 2 + hi)
        results.append(rec.result)

    a, b = eng.scores
    assert a + b == pytest.approx(sum(results))
    assert a == pytest.approx(sum(results[0::2]))
    assert b == pytest.approx(sum(results[1::2]))
    for i, box in enumerate(eng.box_set):
        assert box.weight == pytest.approx(initial[i] + sum(absorbed[i]))
    assert sum(len(v) for v in absorbed.values()) == len(tokens)
