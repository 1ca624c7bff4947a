import os
"""
Holds all config variables for the price signal simulation
"""
ME = "cascade_v1"
DATA_PATH          = "data/"
DATA_LOG_PATH      = "data/logs"
LOG_PATH           = "log/"
LOG_LEVEL          = "INFO"
AGENT_BASE_NAMES   = {'aggregator': "aggregator", 'prosumer': "prosumer",
                      'household': "household", 'generator': "generator"}

###############################
# Time configuration
###############################
TICKS_PER_DAY = 48  # half hourly ticks

###############################
# Pricing configuration
###############################
# prices are in £/MWh which translates to p/kWh if divided by 10
DEFAULT_PRICE          = 125.0  # initial flat price signal of 12.5p per kWh
ECONOMY_SEVEN_HIGH     = 125.0
ECONOMY_SEVEN_LOW      = 48.0
ECONOMY_SEVEN_MORNING  = 7.5   # hour of day the high tariff starts
ECONOMY_SEVEN_EVENING  = 23.5  # hour of day the low tariff starts again

# co-efficients estimated from Figure 4 in Roscoe and Ault
ROSCOE_AULT_A = 0.0006
ROSCOE_AULT_B = 12.0
ROSCOE_AULT_C = 40.0

MAX_SUPPLY_CAPACITY_GWATTS      = 70.5
MAX_GENERATOR_CAPACITY_GWATTS   = 60.0
MAX_SYSTEM_BUY_PRICE_PNDSPERMWH = 1000.0

# predicted customer demand is bootstrapped from the base demand divided by this
BASE_DEMAND_PREDICTION_DIVISOR = 7000.0
# over capacity scaling: factor = OVER_CAPACITY_SCALE - exp(-(demand - predicted))
OVER_CAPACITY_SCALE = 1.25

###############################
# Population defaults for the CLI
###############################
HOUSEHOLD_PEAK_KW   = 1.5
GENERATOR_CAPACITY  = 2.0
HOUSEHOLD_ELASTICITY = 0.1


###############################
#logging setup
###############################
def get_log_handlers():
    return {
        'file': {
            'level': LOG_LEVEL,
            'formatter': 'standard',
            'class': 'logging.FileHandler',
            'mode': 'a',
            'filename': os.path.join(os.curdir, LOG_PATH, "simulation.log")
        }
    }


def get_log_config():
    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'standard': {
                'format': '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
            },
        },
        'handlers': {
            'default': {
                'level': LOG_LEVEL,
                'formatter': 'standard',
                'class': 'logging.StreamHandler',
            },
        },
        'loggers': {
            '': {
                'level': LOG_LEVEL,
                'handlers': ['default'],
                'propagate': True,
            },
        }
    }
