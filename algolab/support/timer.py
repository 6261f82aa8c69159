"""
Wall-clock timing for the occasional experiment.

Set VERBOSE to have every Timer report itself on the way out of its `with` block.
"""
import time

VERBOSE = False

class Timer:
	def __init__(self, label='elapsed'):
		self.label = label
		self.__start, self.__stop = None, None
	
	def __enter__(self):
		self.__start, self.__stop = time.perf_counter(), None
		return self
	
	def __exit__(self, *exc_info):
		self.__stop = time.perf_counter()
		if VERBOSE: print("%s: %0.6f seconds"%(self.label, self.elapsed()))
	
	def elapsed(self) -> float:
		""" Seconds so far, or in total once the `with` block is finished. Zero if never started. """
		if self.__start is None: return 0.0
		stop = time.perf_counter() if self.__stop is None else self.__stop
		return stop - self.__start
