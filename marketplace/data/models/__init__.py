#import modeli zeby SQLAlchemy je zarejestrowal w base metadata

from marketplace.data.models.kv_entry import KvEntryModel

__all__ = ["KvEntryModel"]
