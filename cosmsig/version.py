COSMSIG_VERSION = '0.3.1'    # version of the client package
