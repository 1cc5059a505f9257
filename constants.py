from enum import Enum

# drawing area of the cluster demo
WIDTH = 720
HEIGHT = 560

CLUSTER_COUNT = 10
CLUSTER_SIZE = 100
MAX_STEP = 100
SEED = 42

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

COLORS = ['r', 'g', 'b', 'm', 'c', 'y', 'k']


class Distribution(str, Enum):
    UNIFORM = "uniform"
    GAUSSIAN = "gaussian"
    CIRCLE = "circle"
    CLUSTERS = "clusters"
