from typing import Dict, List

HEALTHY = "Healthy"
NOT_HEALTHY = "Not Healthy"
OBESE = "Obese"

GENDERS = ("Male", "Female")
DIET_TYPES = ("Vegan", "Vegetarian", "Non-Veg")


def calculate_bmi(weight_kg: float, height_cm: float) -> float:
    if height_cm <= 0:
        raise ValueError("height must be positive")
    height_m = height_cm / 100
    return weight_kg / (height_m * height_m)


def classify_bmi(bmi: float) -> str:
    if bmi >= 30:
        return OBESE
    if bmi >= 25:
        return NOT_HEALTHY
    if bmi >= 18.5:
        return HEALTHY
    return NOT_HEALTHY


_OBESE_PLANS = {
    "Vegan": [
        "Oats, almond milk, salad",
        "Chia pudding, lentils, steamed veggies",
        "Tofu scramble, beans, quinoa",
        "Smoothie, chickpeas, greens",
        "Fruit bowl, tempeh, broccoli",
        "Vegan yogurt, seitan, spinach",
        "Granola, hummus, mixed salad",
    ],
    "Vegetarian": [
        "Oats, paneer, salad",
        "Greek yogurt, dal, steamed veggies",
        "Eggs, beans, quinoa",
        "Smoothie, cottage cheese, greens",
        "Fruit bowl, cheese, broccoli",
        "Vegetarian omelette, lentils, spinach",
        "Granola, paneer, mixed salad",
    ],
}

_NOT_HEALTHY_PLANS = {
    "Vegan": [
        "Poha, lentils, veggies",
        "Paratha, dal, salad",
        "Upma, beans, greens",
        "Dosa, tofu, veggies",
        "Idli, chickpeas, salad",
        "Fruit, tempeh, mixed veggies",
        "Oats, hummus, salad",
    ],
    "Vegetarian": [
        "Eggs, rice, veggies",
        "Paratha, dal, salad",
        "Poha, paneer, beans",
        "Upma, cheese, greens",
        "Dosa, tofu, veggies",
        "Idli, beans, salad",
        "Fruit, paneer, mixed veggies",
    ],
    "Non-Veg": [
        "Eggs, rice, veggies",
        "Paratha, dal, salad",
        "Poha, chicken, beans",
        "Upma, fish, greens",
        "Dosa, beef, veggies",
        "Idli, turkey, salad",
        "Fruit, paneer, mixed veggies",
    ],
}

_HEALTHY_PLANS = {
    "Vegan": [
        "Oats, almond milk, salad",
        "Vegan yogurt, lentils, veggies",
        "Tofu scramble, beans, quinoa",
        "Smoothie, chickpeas, greens",
        "Fruit bowl, tempeh, broccoli",
        "Granola, seitan, spinach",
        "Oats, hummus, salad",
    ],
    "Vegetarian": [
        "Oats, paneer, salad",
        "Yogurt, dal, veggies",
        "Eggs, beans, quinoa",
        "Smoothie, cottage cheese, greens",
        "Cheese, lentils, broccoli",
        "Eggs, paneer, spinach",
        "Fruit, tofu, salad",
    ],
    "Non-Veg": [
        "Oats, chicken, salad",
        "Yogurt, fish, veggies",
        "Eggs, turkey, quinoa",
        "Smoothie, beef, greens",
        "Cheese, salmon, broccoli",
        "Eggs, chicken, spinach",
        "Fruit, tofu, salad",
    ],
}

# Only the obese non-veg plan differs between genders.
DIET_PLANS: Dict[str, Dict[str, Dict[str, List[str]]]] = {
    "Male": {
        OBESE: {
            **_OBESE_PLANS,
            "Non-Veg": [
                "Oats, grilled chicken, salad",
                "Greek yogurt, fish, steamed veggies",
                "Eggs, turkey, quinoa",
                "Smoothie, lean beef, greens",
                "Cottage cheese, salmon, broccoli",
                "Scrambled eggs, chicken, spinach",
                "Fruit bowl, tofu, mixed salad",
            ],
        },
        NOT_HEALTHY: _NOT_HEALTHY_PLANS,
        HEALTHY: _HEALTHY_PLANS,
    },
    "Female": {
        OBESE: {
            **_OBESE_PLANS,
            "Non-Veg": [
                "Oats, grilled chicken, salad",
                "Yogurt, fish, steamed veggies",
                "Eggs, tofu, quinoa",
                "Smoothie, beans, greens",
                "Cheese, salmon, broccoli",
                "Scrambled eggs, chicken, spinach",
                "Fruit bowl, tofu, mixed salad",
            ],
        },
        NOT_HEALTHY: _NOT_HEALTHY_PLANS,
        HEALTHY: _HEALTHY_PLANS,
    },
}


def suggest_diet(gender: str, status: str, diet_type: str) -> List[str]:
    return list(DIET_PLANS[gender][status][diet_type])
