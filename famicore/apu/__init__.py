"""Sound channels, envelopes, sweeps, length counters, frame counter and filters."""