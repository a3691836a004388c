import hashlib
import json
import math
import sys

# Constants

TRIVIAL_PARTITION_KEY = "0"
MAX_PARTITION_KEY_LENGTH = 256
PARTITION_KEY_FIELD = "partitionKey"

#

class SerializationError(Exception):
    pass

#

def is_interactive():
    return hasattr(sys, 'ps1')

#

# JavaScript truthiness: None, False, 0, NaN and "" are falsy, empty containers are not.
def is_truthy(any):
    if any is None or any is False:
        return False
    #
    if isinstance(any, (int, float)):
        return any != 0 and not (isinstance(any, float) and math.isnan(any))
    #
    if isinstance(any, str):
        return any != ""
    #
    return True


# NaN and +/-Infinity become null, as in JSON.stringify.
def replace_non_finite(any, id_set=None):
    id_set = set() if id_set is None else id_set
    #
    if isinstance(any, float):
        return any if math.isfinite(any) else None
    #
    if isinstance(any, (dict, list, tuple)):
        if id(any) in id_set:
            raise ValueError("Circular reference detected")
        id_set.add(id(any))
        #
        if isinstance(any, dict):
            replaced = {key: replace_non_finite(value, id_set) for key, value in any.items()}
        else:
            replaced = [replace_non_finite(value, id_set) for value in any]
        #
        id_set.remove(id(any))
        return replaced
    #
    return any


def to_json_str(any):
    try:
        json_str = json.dumps(replace_non_finite(any), separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError, RecursionError) as e:
        raise SerializationError(f"Could not serialize {type(any).__name__} to JSON: {e}") from e
    #
    return json_str


# Length in UTF-16 code units, like String.prototype.length.
def js_length(str):
    return len(str.encode("utf-16-le", "surrogatepass")) // 2


def sha3_512_hex(str):
    return hashlib.sha3_512(str.encode("utf-8", "surrogatepass")).hexdigest()
