'''
config module

This module handles all configuration based operations within the frameseq
library. Precedence is defaults, then the user's yaml file, then FRAMESEQ_*
environment variables. Config only affects logging (log_level, log_file);
it never changes what a Sequence computes.
'''

import logging
import os

import yaml

from frameseq.lib import loggeria
from frameseq.lib.exceptions import ConfigError

logger = logging.getLogger(__name__)

ENV_PREFIX = 'FRAMESEQ_'
ENV_CONFIG_PATH = 'FRAMESEQ_CONFIG'


class Config(object):
    default_config = {'log_level': "INFO",
                      'log_file': None}
    default_config_location = os.path.join(os.path.expanduser('~'), '.frameseq', 'config.yml')

    def __init__(self):
        combined_config = dict(self.default_config)
        combined_config.update(self.get_user_config())
        combined_config.update(self.get_environment_config())

        log_level = combined_config.get('log_level')
        if isinstance(log_level, str):
            combined_config['log_level'] = log_level.upper()

        self.verify_params(combined_config)
        self.config = combined_config
        logger.debug('config is:\n%s', self.config)

    def get_environment_config(self):
        '''
        Look for any environment settings that start with FRAMESEQ_
        Cast any variables to ints or bools if necessary
        '''
        skipped_variables = [ENV_CONFIG_PATH]
        environment_config = {}
        for var_name, var_value in os.environ.items():
            if not var_name.startswith(ENV_PREFIX) or var_name in skipped_variables:
                continue

            config_key_name = var_name[len(ENV_PREFIX):].lower()
            environment_config[config_key_name] = self._process_var_value(var_value)

        return environment_config

    @classmethod
    def _process_var_value(cls, env_var):
        '''
        Read the given value (which was read from an environment variable) and
        cast it to an appropriate value for the config.
        1. cast integer strings to python ints
        2. cast bool strings into actual python bools
        '''
        if env_var.isdigit():
            return int(env_var)

        bool_values = {"true": True,
                       "false": False}

        return bool_values.get(env_var.lower(), env_var)

    def get_config_file_paths(self):
        if ENV_CONFIG_PATH in os.environ:
            possible_paths = [x for x in os.environ[ENV_CONFIG_PATH].split(os.pathsep) if len(x) > 0]
            if len(possible_paths) > 0:
                return possible_paths
        # This is for when FRAMESEQ_CONFIG is unset or empty.
        return [self.default_config_location]

    def get_user_config(self):
        '''
        Load the first config file that exists. No file is fine, we just use
        the defaults.
        '''
        for config_file in self.get_config_file_paths():
            logger.debug('Attempting to load config located at: %s', config_file)
            if not os.path.isfile(config_file):
                logger.debug('Config filepath: %s does not point to a file', config_file)
                continue

            with open(config_file, 'r') as fp:
                config = yaml.safe_load(fp)

            # An empty yaml file loads as None
            if config is None:
                return {}
            if not isinstance(config, dict):
                message = 'config found at %s is not a yaml mapping' % config_file
                logger.error(message)
                raise ConfigError(message)
            return config
        return {}

    @staticmethod
    def verify_params(config):
        log_level = config.get('log_level')
        if log_level not in loggeria.LEVEL_MAP:
            raise ConfigError("log_level must be one of %s, got %r" % (loggeria.LEVELS, log_level))

        log_file = config.get('log_file')
        if log_file is not None and not isinstance(log_file, str):
            raise ConfigError("log_file must be a path, got %r" % (log_file,))


def load_config():
    '''
    Create a new config object based on config.yml and the environment and
    return it. Set up frameseq logging with the configured level and, if
    log_file is set, a rotating log file.
    '''
    configuration = Config().config
    loggeria.setup_frameseq_logging(
        configuration['log_level'], log_filepath=configuration.get('log_file'))
    return configuration
