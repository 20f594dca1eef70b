"""全局配置"""

# Sigmoid 权重策略参数
GAMMA = 1.0                   # 负载敏感度
DELTA_C = 0.3                 # 负载阈值
SIGMOID_OFFSETS = (0.0, 0.1, 0.2, 0.3)   # 计算 / 保留 / 传输 / 准备 四项偏移

# 分段斜率权重策略参数
LOW_LOAD_BOUND = 0.4          # load <= 0.4 为低负载（含边界）
HIGH_LOAD_BOUND = 0.7         # 0.4 < load <= 0.7 为中负载，其余为高负载
LOW_BASE_WEIGHTS = (0.5, 0.2, 0.2, 0.1)
MEDIUM_BASE_WEIGHTS = (0.4, 0.3, 0.2, 0.1)
MEDIUM_SLOPE_COEFFS = (0.1, 0.05, -0.05, -0.05)
HIGH_BASE_WEIGHTS = (0.3, 0.4, 0.2, 0.1)
HIGH_SLOPE_COEFFS = (0.1, 0.1, -0.05, -0.05)
INITIAL_WEIGHTS = (0.5, 0.2, 0.2, 0.1)   # 首个时隙之前的 previousWeights

# 容器保留 / 传输 / 预取
RETENTION_THRESHOLD = 0.5     # retentionCost 不超过该值才保留
RETENTION_LOAD_CEILING = 0.7  # 高于该负载不保留
TRANSFER_COST_MULTIPLIER = 0.1
PREFETCH_COST_MULTIPLIER = 0.05

# 压力驱动的副本扩缩容
SCALE_UP_THRESHOLD = 0.5      # 压力高于该值且未满时加一个副本，同时是放置的压力上限
SCALE_DOWN_THRESHOLD = 0.1    # 压力低于该值且副本多于 1 时减一个副本
TARGET_RTT = 70.0             # 性能压力的目标往返时延（毫秒）
RTT_STEEPNESS = 0.2           # 性能压力 logistic 曲线斜率

# 扰动范围（乘性因子）
REQUEST_PERTURB_RANGE = (0.9, 1.1)
NODE_PERTURB_RANGE = (0.9, 1.1)

# 数值容差
EPS_TOL = 1e-9                # 权重归一化容差

# 实验配置
N_SLOTS = 5                   # 每次运行的时隙数
N_RUNS = 30                   # 重复次数
POLICIES = ('sigmoid', 'piecewise-slope')

# 场景配置
# capacity: 每个节点的容量范围；load: 每个请求的计算负载范围
SCENARIOS = {
    'light':    {'n_nodes': 3, 'n_requests': 6,  'capacity': (110, 130), 'load': (10, 35), 'n_slots': 10},
    'moderate': {'n_nodes': 5, 'n_requests': 20, 'capacity': (100, 140), 'load': (10, 40), 'n_slots': 10},
    'heavy':    {'n_nodes': 5, 'n_requests': 40, 'capacity': (80, 120),  'load': (15, 45), 'n_slots': 10},
}
