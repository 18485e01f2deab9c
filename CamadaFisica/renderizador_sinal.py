import logging
import math

logger = logging.getLogger(__name__)

# Estilo do gráfico (cores no formato aceito por matplotlib/Tk).
COR_GRADE = "#cccccc"
COR_EIXO_ZERO = "#9c9a9a"
COR_ROTULO = "#000000"
COR_SINAL = "#007acc"
LARGURA_GRADE = 1
LARGURA_EIXO_ZERO = 1.5
LARGURA_SINAL = 2
TAMANHO_FONTE_ROTULO = 12
MARGEM_ROTULO = 5  # Afastamento (px) do rótulo em relação à borda direita / linha.
NIVEIS_GRADE_MAXIMO = 2000  # ceil(2 * V) acima disso não é desenhado (amplitude até 1000 V).


def is_valid_amplitude(amplitude):
    """Amplitude plotável: número estritamente positivo com no máximo NIVEIS_GRADE_MAXIMO níveis de grade."""
    try:
        amplitude = float(amplitude)
    except (TypeError, ValueError):
        return False
    if not (amplitude > 0 and math.isfinite(amplitude * 2)):
        return False
    return math.ceil(amplitude * 2) <= NIVEIS_GRADE_MAXIMO


def voltage_to_y(value, amplitude, height):
    """
    Converte uma tensão em coordenada vertical (pixels, y cresce para baixo).
    +amplitude -> topo (0), 0 V -> centro, -amplitude -> base (height).
    """
    mid_y = height / 2
    return mid_y - value * (height / 2) / amplitude


def horizontal_grid(amplitude, width, height):
    """
    Gera as linhas horizontais da grade e seus rótulos de tensão.
    A linha central (0 V) é desenhada mais escura e espessa.
    """
    mid_y = height / 2
    voltage_levels = math.ceil(amplitude * 2)
    line_spacing = height / voltage_levels
    half = voltage_levels / 2

    operations = []
    for i in range(voltage_levels + 1):
        y = mid_y + (i - half) * line_spacing
        is_center = 2 * i == voltage_levels
        operations.append({
            'type': 'line',
            'points': [(0, y), (width, y)],
            'color': COR_EIXO_ZERO if is_center else COR_GRADE,
            'line_width': LARGURA_EIXO_ZERO if is_center else LARGURA_GRADE,
        })

        # Mesmo fator de escala do traçado: (L/2 - i) * (A / (L/2)).
        label_voltage = (half - i) * (amplitude / half)
        operations.append({
            'type': 'text',
            'x': width - MARGEM_ROTULO,
            'y': y + MARGEM_ROTULO,
            'text': f"{label_voltage:.1f}V",
            'color': COR_ROTULO,
            'font_size': TAMANHO_FONTE_ROTULO,
            'align': 'right',
        })
    return operations


def vertical_grid(sample_count, width, height):
    """Linhas verticais nas fronteiras de cada período de amostra (x = k * bitWidth)."""
    bit_width = width / sample_count
    return [
        {
            'type': 'line',
            'points': [(k * bit_width, 0), (k * bit_width, height)],
            'color': COR_GRADE,
            'line_width': LARGURA_GRADE,
        }
        for k in range(sample_count)
    ]


def step_path(samples, amplitude, width, height):
    """
    Calcula os vértices da forma de onda retangular (degraus).
    Cada amostra gera um segmento horizontal; quando a próxima amostra difere,
    um segmento vertical é inserido na fronteira, em vez de uma rampa.
    """
    bit_width = width / len(samples)
    points = [(0, voltage_to_y(samples[0], amplitude, height))]
    for i, value in enumerate(samples):
        x_end = (i + 1) * bit_width
        points.append((x_end, voltage_to_y(value, amplitude, height)))
        if i < len(samples) - 1 and samples[i + 1] != value:
            points.append((x_end, voltage_to_y(samples[i + 1], amplitude, height)))
    return points


def build_drawing_operations(samples, amplitude, width, height):
    """
    Monta a lista ordenada de operações de desenho (limpeza, grade, rótulos, sinal).
    Operações posteriores ficam por cima das anteriores.

    Retorna lista vazia quando não há o que plotar: sem amostras, amplitude
    inválida (0, negativa, NaN, None, grande demais para a grade) ou dimensões não positivas.
    """
    samples = [float(s) for s in samples]
    if not samples:
        logger.debug("build_drawing_operations: nenhuma amostra, nada a desenhar")
        return []
    if not is_valid_amplitude(amplitude):
        logger.warning(f"build_drawing_operations: amplitude inválida ({amplitude!r}), renderização ignorada")
        return []
    if not (width > 0 and height > 0):
        logger.warning(f"build_drawing_operations: dimensões inválidas ({width}x{height}), renderização ignorada")
        return []

    amplitude = float(amplitude)
    operations = [{'type': 'clear', 'width': width, 'height': height}]
    operations.extend(horizontal_grid(amplitude, width, height))
    operations.extend(vertical_grid(len(samples), width, height))
    operations.append({
        'type': 'line',
        'points': step_path(samples, amplitude, width, height),
        'color': COR_SINAL,
        'line_width': LARGURA_SINAL,
    })
    logger.debug(f"build_drawing_operations: {len(operations)} operações para {len(samples)} amostras")
    return operations


def draw_operations(operations, surface):
    """Aplica as operações na superfície de desenho, na ordem recebida."""
    for op in operations:
        op_type = op['type']
        if op_type == 'clear':
            surface.clear(op['width'], op['height'])
        elif op_type == 'line':
            surface.draw_line(op['points'], op['color'], op['line_width'])
        elif op_type == 'text':
            surface.draw_text(op['x'], op['y'], op['text'], op['color'], op['font_size'], op['align'])
        else:
            raise ValueError(f"Operação de desenho desconhecida: {op_type}")
    if operations and hasattr(surface, 'flush'):
        surface.flush()


def render(samples, amplitude, width, height, surface):
    """
    Renderiza a sequência de amostras como forma de onda em degraus sobre uma grade de tensão.
    Sem amostras (ou com entrada não plotável) a superfície não é alterada.
    """
    operations = build_drawing_operations(samples, amplitude, width, height)
    if not operations:
        return
    draw_operations(operations, surface)
