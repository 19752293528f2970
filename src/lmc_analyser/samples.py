"""
Встроенный пример: три ответа ассистентов на вопрос о том, как облегчить кашель.
"""

from typing import List

from .interfaces.analysis import ResponseInput

# Имена по умолчанию для окон ввода (в порядке появления)
DEFAULT_NAMES = ['Claude', 'ChatGPT', 'Gemini', 'Perplexity', 'Llama', 'Mistral', 'GPT-4', 'Bard']

EXAMPLE_TEXTS = {
    'Claude': (
        "Pour soulager la toux, il est important de rester bien hydraté en buvant beaucoup de "
        "liquides chauds comme du thé ou du bouillon. Un humidificateur peut aider à humidifier "
        "les voies respiratoires. Le miel a des propriétés apaisantes naturelles. Le repos est "
        "essentiel pour permettre au corps de récupérer. Si la toux persiste plus de quelques "
        "jours ou s'accompagne de fièvre, il faut consulter un médecin."
    ),
    'ChatGPT': (
        "Les remèdes pour calmer la toux incluent : boire des boissons chaudes (tisanes, eau "
        "tiède avec du miel et du citron), utiliser un humidificateur pour l'air sec, prendre des "
        "pastilles pour la gorge, et se reposer suffisamment. Évitez les irritants comme la fumée. "
        "Si la douleur persiste ou si vous êtes allergique à certains ingrédients, consultez un "
        "professionnel de santé. Pour les enfants, adaptez les dosages et évitez le miel avant 1 an."
    ),
    'Gemini': (
        "Voici des astuces de grand-mère pour le confort : Le miel est un classique efficace, "
        "surtout avec du citron chaud. L'humidité combat l'air sec qui aggrave la toux. Dormir la "
        "tête surélevée aide à drainer. Les pastilles gardent la gorge humide. Important : si la "
        "toux persiste ou s'aggrave, consultez un médecin. Ces conseils ne remplacent pas l'avis "
        "d'un professionnel de santé."
    ),
}


def default_name(index: int) -> str:
    """Имя по умолчанию для ответа с данным номером (с нуля)."""
    if 0 <= index < len(DEFAULT_NAMES):
        return DEFAULT_NAMES[index]
    return f"IA {index + 1}"


def example_responses() -> List[ResponseInput]:
    """Ответы встроенного примера с id ai_0, ai_1, ..."""
    return [
        ResponseInput(id=f"ai_{i}", display_name=name, text=text)
        for i, (name, text) in enumerate(EXAMPLE_TEXTS.items())
    ]
