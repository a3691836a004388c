from collections.abc import Mapping

from dpk.helpers import TRIVIAL_PARTITION_KEY, MAX_PARTITION_KEY_LENGTH, PARTITION_KEY_FIELD, is_truthy, js_length, to_json_str, sha3_512_hex

#

def get_candidate(event, partition_key_field=PARTITION_KEY_FIELD):
    partition_key_field_str = partition_key_field
    #
    if isinstance(event, Mapping):
        partition_key = event.get(partition_key_field_str)
        if is_truthy(partition_key):
            return partition_key
    #
    return event


def candidate_to_str(candidate):
    return candidate if isinstance(candidate, str) else to_json_str(candidate)


def hash_partition_key(partition_key_str):
    return sha3_512_hex(partition_key_str)


def deterministic_partition_key(event=None, trivial_partition_key=TRIVIAL_PARTITION_KEY, max_partition_key_length=MAX_PARTITION_KEY_LENGTH, partition_key_field=PARTITION_KEY_FIELD):
    if not is_truthy(event):
        return trivial_partition_key
    #
    partition_key_str = candidate_to_str(get_candidate(event, partition_key_field))
    #
    if js_length(partition_key_str) > max_partition_key_length:
        return hash_partition_key(partition_key_str)
    #
    return partition_key_str
