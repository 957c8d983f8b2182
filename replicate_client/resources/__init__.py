"""API resources.

- ``predictions``: create, get, list, cancel and stream predictions
- ``models``: get and list models; get, list, delete model versions
- ``base``: request/parse helpers shared by the resources
"""

from .models import Models, ModelVersions
from .predictions import Predictions

__all__ = ["Models", "ModelVersions", "Predictions"]
