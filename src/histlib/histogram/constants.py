"""Shared numeric constants for the histogram engine."""

import sys

# 右闭规则下，上界附近落入最后一个分箱的绝对容差
RIGHT_CLOSED_EPS = 1e-12
# 最小安全分箱宽度
WIDTH_EPS = sys.float_info.epsilon
# 单次计算允许的分箱数上限
MAX_BINS = 10_000
# 判定 range / h 是否“就是整数”的相对容差
BIN_COUNT_RTOL = 1e-9
