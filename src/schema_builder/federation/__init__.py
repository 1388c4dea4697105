from .exclusions import DEFAULT_EXCLUSIONS, PRODUCT_UPC_EXCLUSION, ExclusionRule
from .transformer import FederationTransformer

__all__ = ["DEFAULT_EXCLUSIONS", "PRODUCT_UPC_EXCLUSION", "ExclusionRule", "FederationTransformer"]
