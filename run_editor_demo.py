import cv2

from sketchpad_cli.cli import get_target_run_folder
from sketchpad_shapes import CanvasEditor, EditorConfig


class EditorDemo:
    """
    Drives a CanvasEditor the way a user would and snapshots each step.

    Design: one method per interaction, each followed by a saved frame.
    """

    def __init__(self, output_folder: str):
        self.output_folder = output_folder
        self.editor = CanvasEditor(EditorConfig(grid_size=20))
        self.step = 0

    def snapshot(self, label: str) -> None:
        frame = self.editor.render()
        path = f"{self.output_folder}/{self.step:02d}_{label}.png"
        cv2.imwrite(path, frame)
        print(f"  [{self.step:02d}] {label:<18} -> {path}")
        self.step += 1

    def build_scene(self) -> None:
        self.editor.create_shape("rectangle", 100, 100)
        self.editor.create_shape("circle", 350, 150)
        self.editor.create_shape("triangle", 550, 350)
        self.snapshot("created")

    def drag_rectangle(self) -> None:
        self.editor.pointer_down(150, 125)
        for step in range(1, 6):
            self.editor.pointer_move(150 + step * 20, 125 + step * 10)
        self.editor.pointer_up()
        self.snapshot("dragged")

    def rotate_rectangle(self) -> None:
        for degrees in (90, 180, 270):
            self.editor.set_quick_rotation(degrees)
            self.snapshot(f"rotated_{degrees}")

    def stretch_triangle(self) -> None:
        triangle = self.editor.shapes.at(2)
        self.editor.select_shape(triangle)
        self.editor.update_property("side_a", 150)
        print(f"  triangle sides after repair: {triangle.sides}")
        self.snapshot("triangle_repaired")

    def delete_circle(self) -> None:
        self.editor.pointer_down(375, 175)
        self.editor.key_down("Delete")
        self.snapshot("circle_deleted")


def main():
    output_folder = get_target_run_folder("editor_demo")
    print(f"Saving frames to {output_folder}")

    demo = EditorDemo(output_folder)
    demo.build_scene()
    demo.drag_rectangle()
    demo.rotate_rectangle()
    demo.stretch_triangle()
    demo.delete_circle()

    print("\nShape list:")
    for entry in demo.editor.shape_list():
        print(f"  {entry}")


if __name__ == "__main__":
    main()
