from ape.api import PluginConfig

from ape_funcvariation._utils import DEFAULT_PAY_EXACT, DEFAULT_PAY_MINIMUM


class FuncVariationConfig(PluginConfig):
    pay_minimum: int = DEFAULT_PAY_MINIMUM
    pay_exact: int = DEFAULT_PAY_EXACT
    contract_name: str = "FuncVariation"
    sender_index: int = 0
