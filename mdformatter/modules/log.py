import sys
import time


def timestamp():
    return time.strftime("%Y-%m-%d %H:%M:%S", time.gmtime())


def print_log(name, message):
    print('[{0}][{1}]: {2}'.format(timestamp(), name, message), flush=True)


def print_error(name, message):
    print('[{0}][{1}][ERROR]: {2}'.format(timestamp(), name, message), file=sys.stderr, flush=True)
