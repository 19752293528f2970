"""Наборы французских текстов для тестирования.

Пара ответов про мёд содержит по одному похожему утверждению,
остальные предложения утверждениями не являются.
"""

HONEY_SOOTHES = (
    "Le miel apaise la toux et réduit l'irritation de la gorge. "
    "Pensez à boire de l'eau tiède tout au long de la journée."
)

HONEY_CALMS = (
    "Le miel calme la toux et réduit l'irritation de la gorge. "
    "Buvez une tisane chaude avant le coucher pour bien dormir."
)

SHORT_ANSWER = "Le miel, tout simplement."

CLAIMS_TEXT = (
    "Le miel est un remède ancien et très apprécié. "
    "Les enfants adorent les histoires racontées le soir. "
    "Ce sirop n'a pas d'effet secondaire connu chez l'adulte."
)

REPEATED_BEES = "Les abeilles produisent du miel doré. Les abeilles produisent du miel doré."

CLAIM_X = "Le miel calme la toux sèche rapidement"
CLAIM_X_CLOSE = "Le miel calme la toux sèche"
CLAIM_Z = "Le gingembre réchauffe la gorge irritée"
CLAIM_W = "Les pastilles humidifient la gorge"
