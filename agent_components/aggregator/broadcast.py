from model.signal_buffer import SignalBuffer


def assemble_broadcast(source: SignalBuffer, start_tick: int, requested_length: int) -> SignalBuffer:
    """
    Populates a broadcast signal with the source signal starting from `start_tick` and continuing for
    `requested_length` samples, repeating copies of the source if necessary to pad the broadcast out.

    out[k] == source.get(start_tick + k) for every k in [0, requested_length)
    """
    out = SignalBuffer(requested_length)
    length = source.length
    start_index = int(start_tick) % length

    # rest of the source from the start index onwards
    written = min(length - start_index, requested_length)
    out.values[0:written] = source.values[start_index:start_index + written]

    # full copies
    num_copies = (requested_length - 1) // length
    for _ in range(num_copies):
        n = min(length, requested_length - written)
        if n <= 0:
            break
        out.values[written:written + n] = source.values[0:n]
        written += n

    # remaining tail
    if requested_length > written:
        remaining = requested_length - written
        out.values[written:] = source.values[0:remaining]
    return out
