from typing import TypedDict


class PresetPrompt(TypedDict):
    """Canned instruction offered by the presentation layer."""

    label: str
    text: str


SAMPLE_PROMPT = (
    "Hyper-realistic cinematic Create an 8k photorealistic image using the "
    "attached photo. A close-up portrait of a woman with long, jet-black, "
    "slightly wind-swept hair falling across her face. Her striking, "
    "light-colored eyes gaze upwards and to the right, catching a sharp, "
    "diagonal beam of natural light that illuminates the high points of her "
    "cheekbone, nose, and plump, glossy, mauve-toned lips a slightly light "
    "weight silk"
)

PRESETS: list[PresetPrompt] = [
    {"label": "Cinematic Portrait", "text": SAMPLE_PROMPT},
    {
        "label": "Retro Filter",
        "text": "Add a vintage 80s retro filter to this image, keep the subject same.",
    },
    {
        "label": "Cyberpunk",
        "text": "Transform the background into a cyberpunk city, neon lights, "
        "night time, keep the person exactly as is.",
    },
    {
        "label": "Professional Headshot",
        "text": "Make background a blurred professional office environment, "
        "improve lighting on face, keep identity strictly.",
    },
]


def find_preset(label: str) -> PresetPrompt | None:
    normalized = label.strip().lower()
    for preset in PRESETS:
        if preset["label"].lower() == normalized:
            return preset
    return None
