# Alinhamentos horizontais aceitos (mesmos nomes do parâmetro "ha" do matplotlib).
ALINHAMENTOS = ("left", "center", "right")


class MatplotlibSurface:
    """
    Superfície de desenho sobre um Axes do Matplotlib, usando coordenadas em pixels
    como um canvas: origem no canto superior esquerdo e eixo y crescendo para baixo.
    """

    def __init__(self, ax):
        """
        Args:
            ax (matplotlib.axes.Axes): Eixo onde o sinal será desenhado.
        """
        self.ax = ax

    def clear(self, width, height):
        """Limpa o eixo e fixa a área visível em [0, width] x [0, height] (y invertido)."""
        self.ax.clear()
        self.ax.set_xlim(0, width)
        self.ax.set_ylim(height, 0)
        self.ax.set_axis_off()

    def draw_line(self, points, color, line_width):
        """Desenha uma polilinha ligando os pontos (x, y) na ordem dada."""
        xs = [p[0] for p in points]
        ys = [p[1] for p in points]
        self.ax.plot(xs, ys, color=color, linewidth=line_width)

    def draw_text(self, x, y, text, color, font_size, align='left'):
        """Escreve um rótulo com a linha de base em y (como fillText de um canvas)."""
        if align not in ALINHAMENTOS:
            raise ValueError(f"Alinhamento inválido: {align!r} (esperado um de {ALINHAMENTOS})")
        self.ax.text(x, y, text, color=color, fontsize=font_size,
                     ha=align, va='baseline')

    def flush(self):
        """Solicita o redesenho da figura (necessário quando embutida no Tkinter)."""
        canvas = self.ax.figure.canvas
        if canvas is not None:
            canvas.draw_idle()
