"""Sample recipes loaded into an empty store on startup."""
from __future__ import annotations

from core.models import Difficulty, NewRecipe, NutritionFacts

SEED_RECIPES: list[NewRecipe] = [
    NewRecipe(
        title="Mediterranean Chicken Salad",
        description=(
            "A light and fresh salad with grilled chicken, mixed greens, "
            "feta cheese, and a lemon vinaigrette."
        ),
        image_url="https://images.unsplash.com/photo-1546069901-ba9599a7e63c",
        ingredients=[
            "2 boneless, skinless chicken breasts (about 1 pound)",
            "6 cups mixed salad greens",
            "1 cup cherry tomatoes, halved",
            "1 cucumber, diced",
            "1/2 red onion, thinly sliced",
            "1/2 cup kalamata olives, pitted",
            "4 oz feta cheese, crumbled",
            "2 tbsp extra virgin olive oil",
            "1 lemon, juiced",
            "1 tsp dried oregano",
            "Salt and pepper to taste",
        ],
        instructions=[
            "Season chicken breasts with salt, pepper, and a pinch of oregano.",
            "Grill chicken over medium-high heat for 6-7 minutes per side "
            "or until internal temperature reaches 165°F (74°C).",
            "Allow chicken to rest for 5 minutes, then slice into strips.",
            "Whisk together olive oil, lemon juice, oregano, salt, and pepper.",
            "Combine greens, tomatoes, cucumber, red onion, and olives.",
            "Top with the sliced chicken.",
            "Drizzle with the dressing and sprinkle with feta.",
            "Toss gently and serve immediately.",
        ],
        prep_time=15,
        cook_time=15,
        servings=4,
        difficulty=Difficulty.easy,
        tags=["Healthy", "Protein", "Salad", "Gluten-Free"],
        nutrition_facts=NutritionFacts(calories=420, protein=32, carbs=18, fat=24),
    ),
    NewRecipe(
        title="Baked Salmon with Asparagus",
        description=(
            "Perfectly baked salmon fillets with roasted asparagus and "
            "sweet potato mash."
        ),
        image_url="https://images.unsplash.com/photo-1593906930848-a79daafbdcda",
        ingredients=[
            "4 salmon fillets (about 6 oz each)",
            "1 bunch asparagus, trimmed",
            "2 large sweet potatoes, peeled and cubed",
            "3 tbsp olive oil, divided",
            "1 lemon, sliced",
            "2 cloves garlic, minced",
            "2 tbsp fresh dill, chopped",
            "1/4 cup milk",
            "2 tbsp butter",
            "Salt and pepper to taste",
        ],
        instructions=[
            "Preheat oven to 400°F (200°C).",
            "Place salmon on a lined baking sheet and arrange asparagus around it.",
            "Drizzle with 2 tbsp olive oil, season, and sprinkle with garlic and dill.",
            "Top the salmon with lemon slices.",
            "Bake for 12-15 minutes until the salmon is cooked through.",
            "Meanwhile, boil sweet potatoes until tender, about 15 minutes.",
            "Drain, then mash with milk, butter, salt, and pepper.",
            "Serve salmon and asparagus with the mash on the side.",
        ],
        prep_time=15,
        cook_time=30,
        servings=4,
        difficulty=Difficulty.medium,
        tags=["High Protein", "Seafood", "Gluten-Free", "Omega-3"],
        nutrition_facts=NutritionFacts(calories=380, protein=28, carbs=22, fat=18),
    ),
    NewRecipe(
        title="Quick Vegetable Stir Fry",
        description=(
            "A colorful and nutrient-packed vegetable stir fry with tofu "
            "and brown rice."
        ),
        image_url="https://images.unsplash.com/photo-1512621776951-a57141f2eefd",
        ingredients=[
            "1 block (14 oz) extra-firm tofu, pressed and cubed",
            "2 cups brown rice, cooked",
            "1 red bell pepper, sliced",
            "1 yellow bell pepper, sliced",
            "1 cup broccoli florets",
            "1 cup snap peas",
            "1 carrot, julienned",
            "1 tbsp ginger, minced",
            "2 cloves garlic, minced",
            "3 tbsp soy sauce or tamari",
            "1 tbsp rice vinegar",
            "1 tbsp sesame oil",
            "1 tbsp cornstarch",
            "2 green onions, sliced",
        ],
        instructions=[
            "Whisk soy sauce, rice vinegar, and cornstarch with 2 tbsp water.",
            "Brown the tofu in a hot wok, about 5 minutes, then set aside.",
            "Add sesame oil, ginger, and garlic; stir for 30 seconds.",
            "Stir fry all vegetables for 4-5 minutes until crisp-tender.",
            "Return the tofu, pour in the sauce, and cook 2 minutes more.",
            "Serve over brown rice with green onions.",
        ],
        prep_time=15,
        cook_time=15,
        servings=4,
        difficulty=Difficulty.easy,
        tags=["Vegan", "Plant-Based", "Vegetarian", "Quick"],
        nutrition_facts=NutritionFacts(calories=310, protein=14, carbs=42, fat=12),
    ),
    NewRecipe(
        title="Creamy Garlic Parmesan Pasta",
        description="Weeknight spaghetti tossed in a silky garlic and parmesan sauce.",
        image_url="https://images.unsplash.com/photo-1540420773420-3366772f4999",
        ingredients=[
            "12 oz spaghetti",
            "2 tbsp butter",
            "4 cloves garlic, minced",
            "1 cup heavy cream",
            "1 cup grated parmesan",
            "2 tbsp parsley, chopped",
            "Salt and pepper to taste",
        ],
        instructions=[
            "Cook spaghetti in salted water until al dente; reserve 1/2 cup water.",
            "Melt butter and soften the garlic for 1 minute.",
            "Add cream and simmer for 3 minutes.",
            "Stir in parmesan until smooth, loosening with pasta water.",
            "Toss with the spaghetti and finish with parsley.",
        ],
        prep_time=5,
        cook_time=20,
        servings=4,
        difficulty=Difficulty.easy,
        tags=["Italian", "Quick", "Vegetarian", "Dinner"],
        nutrition_facts=NutritionFacts(calories=610, protein=20, carbs=68, fat=29),
    ),
    NewRecipe(
        title="Classic Apple Crumble",
        description="Warm cinnamon apples under a buttery oat topping.",
        image_url="https://images.unsplash.com/photo-1546069901-ba9599a7e63c",
        ingredients=[
            "5 apples, peeled and sliced",
            "1 tsp cinnamon",
            "1/4 cup sugar",
            "1 tbsp lemon juice",
            "1 cup rolled oats",
            "1/2 cup flour",
            "1/2 cup brown sugar",
            "1/2 cup cold butter, cubed",
        ],
        instructions=[
            "Preheat oven to 350°F (175°C).",
            "Toss apples with cinnamon, sugar, and lemon juice in a baking dish.",
            "Rub oats, flour, brown sugar, and butter together until crumbly.",
            "Scatter the topping over the apples.",
            "Bake for 45 minutes until golden and bubbling.",
        ],
        prep_time=20,
        cook_time=45,
        servings=6,
        difficulty=Difficulty.easy,
        tags=["Dessert", "Vegetarian", "Baking"],
        nutrition_facts=NutritionFacts(calories=390, protein=4, carbs=58, fat=17),
    ),
]
