"""求值结果类型：成功带值 / 失败，不用 None 或 NaN 表示失败"""
import math


class EvalResult:
    """evaluate_expression 的返回值"""

    __slots__ = ('ok', 'value', 'reason')

    def __init__(self, ok, value=None, reason=None):
        self.ok = ok
        self.value = value
        self.reason = reason  # 失败类别，仅用于诊断

    @classmethod
    def success(cls, value):
        return cls(True, float(value))

    @classmethod
    def failure(cls, reason):
        return cls(False, reason=reason)

    @property
    def is_finite(self):
        """成功且值有限（除零等情况 ok 为 True 但值是 NaN/inf）"""
        return self.ok and math.isfinite(self.value)

    def to_dict(self):
        """可序列化为 JSON 的形式；NaN/inf 没有 JSON 表示，按失败输出"""
        if self.is_finite:
            return {'ok': True, 'value': self.value}
        return {'ok': False}

    def __eq__(self, other):
        if not isinstance(other, EvalResult):
            return NotImplemented
        if self.ok != other.ok:
            return False
        if not self.ok:
            return True
        return self.value == other.value or (math.isnan(self.value) and math.isnan(other.value))

    def __hash__(self):
        return hash((self.ok, self.value if self.ok else None))

    def __repr__(self):
        if self.ok:
            return f"EvalResult(ok=True, value={self.value!r})"
        return f"EvalResult(ok=False, reason={self.reason!r})"
