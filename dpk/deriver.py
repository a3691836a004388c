import copy
import glob
import os
import re

from piny import YamlLoader

from dpk.helpers import TRIVIAL_PARTITION_KEY, MAX_PARTITION_KEY_LENGTH, PARTITION_KEY_FIELD, is_interactive, is_truthy, js_length
from dpk.partitioner import get_candidate, candidate_to_str, deterministic_partition_key

class Deriver:
    def __init__(self, config=None):
        if config is None:
            self.config_str = None
            self.config_dict = {}
        elif isinstance(config, dict):
            self.config_str = None
            self.config_dict = copy.deepcopy(config)
        else:
            self.config_str = config
            self.config_dict = self.get_config_dict(config)
        #
        self.dpk_config_dict = self.config_dict["dpk"] if "dpk" in self.config_dict and self.config_dict["dpk"] is not None else {}
        #
        if "trivial.partition.key" not in self.dpk_config_dict:
            self.trivial_partition_key(TRIVIAL_PARTITION_KEY)
        else:
            self.trivial_partition_key(self.scalar_to_str("trivial.partition.key"))
        #
        if "max.partition.key.length" not in self.dpk_config_dict:
            self.max_partition_key_length(MAX_PARTITION_KEY_LENGTH)
        else:
            self.max_partition_key_length(int(self.scalar_to_str("max.partition.key.length")))
        #
        if "partition.key.field" not in self.dpk_config_dict:
            self.partition_key_field(PARTITION_KEY_FIELD)
        else:
            self.partition_key_field(self.scalar_to_str("partition.key.field"))
        #
        if "verbose" not in self.dpk_config_dict:
            verbose_int = 1 if is_interactive() else 0
            self.verbose(verbose_int)
        else:
            self.verbose(int(self.dpk_config_dict["verbose"]))

    #

    def trivial_partition_key(self, new_value=None): # str
        if new_value is not None and (not isinstance(new_value, str) or new_value == ""):
            raise Exception("The trivial partition key must be a non-empty string.")
        #
        return self.get_set_config("trivial.partition.key", new_value)

    def max_partition_key_length(self, new_value=None): # int
        if new_value is not None and (isinstance(new_value, bool) or not isinstance(new_value, int) or new_value < 1):
            raise Exception("The maximum partition key length must be a positive integer.")
        #
        return self.get_set_config("max.partition.key.length", new_value)

    def partition_key_field(self, new_value=None): # str
        if new_value is not None and (not isinstance(new_value, str) or new_value == ""):
            raise Exception("The partition key field must be a non-empty string.")
        #
        return self.get_set_config("partition.key.field", new_value)

    def verbose(self, new_value=None): # int
        return self.get_set_config("verbose", new_value)

    #

    def get_set_config(self, config_key_str, new_value=None, dict=None):
        dict = self.dpk_config_dict if dict is None else dict
        #
        if new_value is not None:
            dict[config_key_str] = new_value
        #
        return dict[config_key_str]

    # YAML null, booleans and collections are rejected instead of being stringified.
    def scalar_to_str(self, config_key_str):
        value = self.dpk_config_dict[config_key_str]
        if value is None or isinstance(value, bool) or not isinstance(value, (str, int)):
            raise Exception(f"Configuration value \"{config_key_str}\" must be a string or an integer (found: {value!r}).")
        #
        return str(value)

    #

    def get_config_dict(self, config_str):
        home_str = os.environ.get("DPK_HOME")
        if not home_str:
            home_str = "."
        #
        config_path_str = None
        configs_path_str_list = [f"{home_str}/configs", f"{home_str}"]
        for configs_path_str in configs_path_str_list:
            for suffix_str in ["yaml", "yml"]:
                if config_path_str is None and os.path.exists(f"{configs_path_str}/{config_str}.{suffix_str}"):
                    config_path_str = f"{configs_path_str}/{config_str}.{suffix_str}"
        if config_path_str is None:
            raise Exception(f"No configuration file \"{config_str}.yaml\" or \"{config_str}.yml\" found in \"{configs_path_str_list}\" (hint: you can use DPK_HOME environment variable to set the dpk home directory).")
        #
        config_dict = YamlLoader(config_path_str).load()
        # An empty file loads as None.
        if config_dict is None:
            config_dict = {}
        #
        return config_dict

    def configs(self, pattern="*"):
        pattern_str = pattern
        #
        home_str = os.environ.get("DPK_HOME")
        if not home_str:
            home_str = "."
        #
        configs_path_str = f"{home_str}/configs"
        config_path_str_list = glob.glob(f"{configs_path_str}/{pattern_str}.yaml") + glob.glob(f"{configs_path_str}/{pattern_str}.yml")
        #
        config_str_list = [re.search(r".*/(.*)\.ya?ml$", config_path_str).group(1) for config_path_str in config_path_str_list if re.search(r".*/(.*)\.ya?ml$", config_path_str) is not None]
        config_str_list.sort()
        #
        return config_str_list

    #

    def partition_key(self, event=None):
        partition_key_str = deterministic_partition_key(event, trivial_partition_key=self.trivial_partition_key(), max_partition_key_length=self.max_partition_key_length(), partition_key_field=self.partition_key_field())
        #
        if self.verbose() > 0:
            self.print_partition_key(event, partition_key_str)
        #
        return partition_key_str

    def print_partition_key(self, event, partition_key_str):
        if not is_truthy(event):
            if self.verbose() >= 2:
                print(f"No event, using trivial partition key \"{partition_key_str}\".")
            return
        #
        candidate_length_int = js_length(candidate_to_str(get_candidate(event, self.partition_key_field())))
        if candidate_length_int > self.max_partition_key_length():
            print(f"Partition key of length {candidate_length_int} exceeds {self.max_partition_key_length()} characters, hashed to {partition_key_str}.")
        elif self.verbose() >= 2:
            print(f"Partition key: {partition_key_str}")

    def partition_keys(self, event_list):
        return [self.partition_key(event) for event in event_list]
