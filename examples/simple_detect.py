"""
Simple example of identifying the recipe of one photograph
"""

from pathlib import Path
from filmdetect import detect, render_report


def main():
    # Replace with actual paths
    image_path = Path("DSCF0001.JPG")
    simulation_dir = Path("recipes")
    
    if not image_path.exists():
        print(f"Error: {image_path} not found")
        print("Please provide a valid image path")
        return
    
    print(f"Detecting recipe for {image_path}...")
    print("-" * 60)
    
    result = detect(image_path, simulation_dir)
    
    if not result.success:
        print(f"✗ Failed: {result.error}")
        return
    
    recipe = result.recipe
    print(f"Film simulation: {recipe.film_simulation}")
    print(f"Dynamic range:   {recipe.dynamic_range}")
    print(f"White balance:   {recipe.white_balance_mode} "
          f"(R{recipe.white_balance_red:+d} B{recipe.white_balance_blue:+d})")
    print()
    print(render_report(result.match))


if __name__ == "__main__":
    main()
