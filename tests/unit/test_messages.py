"""胜负文案测试"""
import threading

import numpy as np
import pytest

from core.messages import (
    LOSE_MESSAGES,
    WIN_MESSAGES,
    MessagePicker,
    lose_message,
    win_message,
)


class FixedSource:
    """按顺序返回预设索引的随机源"""

    def __init__(self, indices):
        self.indices = list(indices)
        self.calls = []

    def integers(self, low):
        self.calls.append(low)
        return self.indices.pop(0)


class TestMessageSets:

    def test_sizes(self):
        assert len(WIN_MESSAGES) == 5
        assert len(LOSE_MESSAGES) == 5
        assert len(set(WIN_MESSAGES)) == 5
        assert len(set(LOSE_MESSAGES)) == 5

    def test_disjoint(self):
        assert not set(WIN_MESSAGES) & set(LOSE_MESSAGES)


class TestMessagePicker:
    """MessagePicker 测试"""

    def test_injected_source(self):
        source = FixedSource([0, 4, 2])
        picker = MessagePicker(source)

        assert picker.win_message() == WIN_MESSAGES[0]
        assert picker.lose_message() == LOSE_MESSAGES[4]
        assert picker.win_message() == WIN_MESSAGES[2]
        assert source.calls == [5, 5, 5]

    def test_message_for(self):
        picker = MessagePicker(FixedSource([1, 3]))
        assert picker.message_for(True) == WIN_MESSAGES[1]
        assert picker.message_for(False) == LOSE_MESSAGES[3]

    def test_membership(self):
        picker = MessagePicker(np.random.default_rng(0))
        for _ in range(200):
            assert picker.win_message() in WIN_MESSAGES
            assert picker.lose_message() in LOSE_MESSAGES

    def test_all_values_observed(self):
        picker = MessagePicker(np.random.default_rng(42))
        wins = {picker.win_message() for _ in range(500)}
        losses = {picker.lose_message() for _ in range(500)}
        assert wins == set(WIN_MESSAGES)
        assert losses == set(LOSE_MESSAGES)

    def test_roughly_uniform(self):
        picker = MessagePicker(np.random.default_rng(7))
        n = 5000
        counts = {m: 0 for m in WIN_MESSAGES}
        for _ in range(n):
            counts[picker.win_message()] += 1
        for count in counts.values():
            assert count / n == pytest.approx(0.2, abs=0.03)

    def test_seeded_reproducible(self):
        a = MessagePicker(np.random.default_rng(3))
        b = MessagePicker(np.random.default_rng(3))
        assert [a.win_message() for _ in range(10)] == [b.win_message() for _ in range(10)]

    def test_default_source(self):
        picker = MessagePicker()
        assert picker.win_message() in WIN_MESSAGES
        assert picker.lose_message() in LOSE_MESSAGES


class TestModuleFunctions:

    def test_default(self):
        assert win_message() in WIN_MESSAGES
        assert lose_message() in LOSE_MESSAGES

    def test_injected(self):
        assert win_message(FixedSource([3])) == WIN_MESSAGES[3]
        assert lose_message(FixedSource([0])) == LOSE_MESSAGES[0]

    def test_concurrent_calls(self):
        results = []
        lock = threading.Lock()

        def worker():
            local = [win_message() for _ in range(100)]
            with lock:
                results.extend(local)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 800
        assert set(results) <= set(WIN_MESSAGES)
