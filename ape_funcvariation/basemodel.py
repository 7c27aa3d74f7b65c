from ape.utils import ManagerAccessMixin

from ape_funcvariation._utils import PLUGIN_NAME
from ape_funcvariation.config import FuncVariationConfig


class FuncVariationBase(ManagerAccessMixin):
    """
    FuncVariation Base Model
    """

    @property
    def plugin_config(self) -> FuncVariationConfig:
        config = self.config_manager.get_config(PLUGIN_NAME)
        if isinstance(config, FuncVariationConfig):
            return config

        # Plugin not registered (e.g. not installed as an ape plugin): use defaults.
        return FuncVariationConfig()
