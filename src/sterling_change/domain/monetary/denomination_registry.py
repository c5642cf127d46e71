from sterling_change.domain.monetary.denomination import Denomination
from sterling_change.domain.monetary.denomination_system import DenominationSystem


# Every coin and note, halfpenny to ten pounds
LSD = DenominationSystem("LSD", "Pre-decimal sterling", list(Denomination))

# As used day to day: the crown hardly circulated
LSD_COMMON = DenominationSystem("LSD_COMMON", "Pre-decimal sterling without the crown", [d for d in Denomination if d is not Denomination.CROWN])

# Coins only, no banknotes
LSD_COINS = DenominationSystem("LSD_COINS", "Pre-decimal sterling coins", [d for d in Denomination if not d.is_note])

# Register all predefined systems
DenominationSystem.register(LSD, overwrite=True)
DenominationSystem.register(LSD_COMMON, overwrite=True)
DenominationSystem.register(LSD_COINS, overwrite=True)
