"""chassisconf session: single-user configurator state.

Entry point::

    from chassisconf.session import ConfiguratorSession

    session = ConfiguratorSession(engine, "Dell PowerEdge R750")
    session.drop("Intel Xeon Platinum 8380", "processor")
    session.remove("processor", 0)
"""

from ._session import ConfiguratorSession

__all__ = ["ConfiguratorSession"]
