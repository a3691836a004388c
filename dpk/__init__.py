from dpk.helpers import SerializationError
from dpk.partitioner import deterministic_partition_key
from dpk.deriver import Deriver
