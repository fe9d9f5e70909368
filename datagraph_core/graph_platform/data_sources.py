"""
    Data-source catalog backed by the ``datagraph.data_source`` entry points.

    Each entry point names a ``DataSourcePlugin`` subclass; the catalog
    instantiates them on first lookup and keeps them by entry-point name.
    Broken or foreign entry points are reported in the log and left out.
"""
import importlib.metadata
import logging
from typing import Dict, Iterable, List, Optional

from datagraph_api.plugins.base import DataSourcePlugin

logger = logging.getLogger(__name__)

# declared under entry_points in setup.py
DATA_SOURCE_EP_GROUP = 'datagraph.data_source'


class DataSourceCatalog:
    """
    Name → DataSourcePlugin lookup.

    Usage:
        catalog = DataSourceCatalog()
        catalog.find('json').parse(text)
    """

    def __init__(self, group: str = DATA_SOURCE_EP_GROUP):
        self._group = group
        self._sources: Optional[Dict[str, DataSourcePlugin]] = None

    def add(self, name: str, source: DataSourcePlugin) -> None:
        """Make ``source`` available under ``name`` without an entry point."""
        if not isinstance(source, DataSourcePlugin):
            raise TypeError(f"'{name}' is a {type(source).__name__}, not a DataSourcePlugin")
        self._discovered()[name] = source

    def find(self, name: str) -> Optional[DataSourcePlugin]:
        return self._discovered().get(name)

    def names(self) -> List[str]:
        return sorted(self._discovered())

    def _discovered(self) -> Dict[str, DataSourcePlugin]:
        if self._sources is None:
            self._sources = {}
            for ep in self._entry_points():
                source = self._instantiate(ep)
                if source is not None:
                    self._sources[ep.name] = source
            logger.info("Data sources in '%s': %s", self._group, sorted(self._sources))
        return self._sources

    def _entry_points(self) -> Iterable[importlib.metadata.EntryPoint]:
        return importlib.metadata.entry_points(group=self._group)

    @staticmethod
    def _instantiate(ep) -> Optional[DataSourcePlugin]:
        try:
            target = ep.load()
        except Exception as exc:
            logger.error("Cannot import data source '%s': %s", ep.name, exc)
            return None
        if not (isinstance(target, type) and issubclass(target, DataSourcePlugin)):
            logger.warning("Entry point '%s' is not a DataSourcePlugin; ignored.", ep.name)
            return None
        return target()
