"""Contains the name for the logger of DiffKit modules.

``diffkit`` uses a simple logging system based on the
`Logging <https://docs.python.org/3/library/logging.html>`__ standard library.
Logging messages are grouped in different levels:

* ``DEBUG``: Setup details of a sampler (degree, step, register format).
* ``WARNING``: An indication that something unexpected
    happened which may require attention, e.g. a difference table that
    contains non-finite values.

By default, only messages of level ``WARNING`` are displayed.

Calling applications can configure the format and log level of the displayed messages
by `Configuring Logging <https://docs.python.org/3/howto/logging.html#configuring-logging>`__
for ``diffkit.logger.diffkit_logger``, e.g.::

    >>> import logging
    >>> logging.basicConfig(
    ...     level=logging.DEBUG,
    ...     format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    ... )  # doctest: +SKIP
"""
import logging

logger_name = "diffkit"
diffkit_logger = logging.getLogger(logger_name)
