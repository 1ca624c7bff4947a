# Using PyDispatcher for publish/subscribe activity within the python environment
# http://pydispatcher.sourceforge.net/
####################
# SIGNALS
####################

# These are names for signals that can be subscribed to.
TICK_START               = "TICK_START"               # scheduler is about to step all agents, kwarg tick
TICK_COMPLETE            = "TICK_COMPLETE"            # all agents have stepped, kwarg tick
AGG_DEMAND_AGGREGATED    = "AGG_DEMAND_AGGREGATED"    # aggregator summed its customers demand, msg (tick, sum)
AGG_PRICE_BROADCAST      = "AGG_PRICE_BROADCAST"      # aggregator pushed a price signal, msg PriceBroadcast
PROSUMER_SIGNAL_RECEIVED = "PROSUMER_SIGNAL_RECEIVED" # prosumer stored an incoming cost signal, msg (agent_id, tick)

ALL_SIGNALS = [TICK_START, TICK_COMPLETE, AGG_DEMAND_AGGREGATED, AGG_PRICE_BROADCAST, PROSUMER_SIGNAL_RECEIVED]
