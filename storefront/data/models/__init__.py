#import every model so SQLAlchemy registers it in Base.metadata

from storefront.data.models.kv_entry import KeyValueModel

__all__ = ["KeyValueModel"]
