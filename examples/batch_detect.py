"""
Example of identifying recipes for a directory of photographs
"""

from collections import Counter
from pathlib import Path
from filmdetect import batch_detect


def main():
    photo_dir = Path("./DCIM")
    simulation_dir = Path("./recipes")
    
    if not photo_dir.exists():
        print(f"Error: Directory {photo_dir} not found")
        print("Please create a 'DCIM' directory with some Fujifilm JPEGs")
        return
    
    images = sorted(photo_dir.glob("*.JPG")) + sorted(photo_dir.glob("*.jpg"))
    
    if not images:
        print(f"No JPEG images found in {photo_dir}")
        return
    
    print(f"Found {len(images)} images")
    print("=" * 60)
    
    def on_progress(current, total, result):
        name = result.image_path.name
        if not result.success:
            print(f"[{current}/{total}] ✗ {name}: {result.error}")
        elif result.perfect_match:
            print(f"[{current}/{total}] ✓ {name}: {result.differences[0].candidate.name}")
        elif result.differences:
            closest = ", ".join(d.candidate.name for d in result.differences)
            print(f"[{current}/{total}] ~ {name}: {closest} ({result.differences[0].score}/16)")
        else:
            print(f"[{current}/{total}] ~ {name}: no recipes in library")
    
    results = batch_detect(images, simulation_dir, progress_callback=on_progress)
    
    # Summary
    print("=" * 60)
    successful = [r for r in results if r.success]
    perfect = [r for r in successful if r.perfect_match]
    
    print(f"\nResults:")
    print(f"  Successful:     {len(successful)}")
    print(f"  Failed:         {len(results) - len(successful)}")
    print(f"  Perfect match:  {len(perfect)}")
    
    usage = Counter(r.differences[0].candidate.name for r in perfect)
    if usage:
        print(f"\nRecipes used:")
        for name, count in usage.most_common():
            print(f"  - {name}: {count}")


if __name__ == "__main__":
    main()
