from pydispatch import dispatcher


class SignalConsumer:
    """An Interface that Signal Consumers should implement. List the (handler, signal) pairs in `connections`
    and the default subscribe/unsubscribe hook them up to the dispatcher"""
    def __init__(self):
        pass

    def connections(self):
        """Implement this to name all (handler, signal) pairs of the component"""
        raise NotImplementedError

    def subscribe(self):
        for handler, signal in self.connections():
            dispatcher.connect(handler, signal=signal)

    def unsubscribe(self):
        for handler, signal in self.connections():
            dispatcher.disconnect(handler, signal=signal)
