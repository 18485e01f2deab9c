# CamadaFisica/test_renderizador_sinal.py

import math
import unittest
from renderizador_sinal import (
    build_drawing_operations, render, step_path, voltage_to_y,
    COR_EIXO_ZERO, COR_GRADE, COR_SINAL,
)


class RecordingSurface:
    """Superfície falsa que apenas registra as chamadas recebidas."""
    def __init__(self):
        self.calls = []

    def clear(self, width, height):
        self.calls.append(('clear', width, height))

    def draw_line(self, points, color, line_width):
        self.calls.append(('line', list(points), color, line_width))

    def draw_text(self, x, y, text, color, font_size, align):
        self.calls.append(('text', x, y, text, color, font_size, align))

    def flush(self):
        self.calls.append(('flush',))


def linhas(operacoes):
    return [op for op in operacoes if op['type'] == 'line']


def textos(operacoes):
    return [op for op in operacoes if op['type'] == 'text']


class TestRenderizadorSinal(unittest.TestCase):
    def test_voltage_to_y(self):
        self.assertEqual(voltage_to_y(5, 5, 100), 0)
        self.assertEqual(voltage_to_y(0, 5, 100), 50)
        self.assertEqual(voltage_to_y(-5, 5, 100), 100)

    def test_two_sample_scenario(self):
        operacoes = build_drawing_operations([5, -5], 5, 100, 100)
        self.assertEqual(operacoes[0], {'type': 'clear', 'width': 100, 'height': 100})

        horizontais = [op for op in linhas(operacoes) if op['points'][0][1] == op['points'][1][1] and op['color'] != COR_SINAL]
        self.assertEqual(len(horizontais), 11)
        centro = [op for op in horizontais if op['color'] == COR_EIXO_ZERO]
        self.assertEqual(len(centro), 1)
        self.assertEqual(centro[0]['points'], [(0, 50), (100, 50)])
        self.assertEqual(centro[0]['line_width'], 1.5)

        verticais = [op for op in linhas(operacoes) if op['points'][0][0] == op['points'][1][0]]
        self.assertEqual([op['points'][0][0] for op in verticais], [0, 50])
        for op in verticais:
            self.assertEqual(op['color'], COR_GRADE)
            self.assertEqual(op['points'][1][1], 100)

        sinal = operacoes[-1]
        self.assertEqual(sinal['color'], COR_SINAL)
        self.assertEqual(sinal['points'], [(0, 0), (50, 0), (50, 100), (100, 100)])

    def test_labels(self):
        rotulos = textos(build_drawing_operations([5, -5], 5, 100, 100))
        self.assertEqual([r['text'] for r in rotulos],
                         ["5.0V", "4.0V", "3.0V", "2.0V", "1.0V", "0.0V",
                          "-1.0V", "-2.0V", "-3.0V", "-4.0V", "-5.0V"])
        self.assertEqual((rotulos[0]['x'], rotulos[0]['y']), (95, 5))
        self.assertTrue(all(r['align'] == 'right' for r in rotulos))

    def test_labels_match_trace_scale(self):
        operacoes = build_drawing_operations([1.2], 1.2, 800, 400)
        horizontais = [op for op in linhas(operacoes) if op['color'] != COR_SINAL and op['points'][0][1] == op['points'][1][1]]
        rotulos = textos(operacoes)
        self.assertEqual([r['text'] for r in rotulos], ["1.2V", "0.4V", "-0.4V", "-1.2V"])
        for linha, rotulo in zip(horizontais, rotulos):
            tensao = float(rotulo['text'][:-1])
            self.assertAlmostEqual(voltage_to_y(tensao, 1.2, 400), linha['points'][0][1], places=6)

    def test_odd_level_count_has_no_emphasized_line(self):
        operacoes = build_drawing_operations([0.5, 0], 0.5, 100, 100)
        grade = [op for op in linhas(operacoes) if op['color'] != COR_SINAL]
        self.assertNotIn(COR_EIXO_ZERO, [op['color'] for op in grade])
        self.assertEqual([r['text'] for r in textos(operacoes)], ["0.5V", "-0.5V"])

    def test_step_path_skips_vertical_for_equal_levels(self):
        pontos = step_path([5, 5, 0], 5, 300, 100)
        self.assertEqual(pontos, [(0, 0), (100, 0), (200, 0), (200, 50), (300, 50)])

    def test_vertical_grid_uses_sample_index(self):
        operacoes = build_drawing_operations([1, -1, 1], 1, 800, 400)
        verticais = [op for op in linhas(operacoes) if op['color'] == COR_GRADE and op['points'][0][0] == op['points'][1][0]]
        self.assertEqual(len(verticais), 3)
        self.assertAlmostEqual(verticais[-1]['points'][0][0], 800 * 2 / 3)

    def test_waveform_drawn_last(self):
        superficie = RecordingSurface()
        render([5, -5, 0], 5, 100, 100, superficie)
        self.assertEqual(superficie.calls[0][0], 'clear')
        self.assertEqual(superficie.calls[-1], ('flush',))
        self.assertEqual(superficie.calls[-2][0], 'line')
        self.assertEqual(superficie.calls[-2][2], COR_SINAL)

    def test_empty_samples_is_noop(self):
        superficie = RecordingSurface()
        render([], 5, 100, 100, superficie)
        self.assertEqual(superficie.calls, [])

    def test_invalid_amplitude_is_noop(self):
        for amplitude in (0, -1, None, math.nan, "abc"):
            superficie = RecordingSurface()
            render([1, -1], amplitude, 100, 100, superficie)
            self.assertEqual(superficie.calls, [], amplitude)

    def test_oversized_amplitude_is_noop(self):
        # 1e308 estoura em 2 * V; 1e6 geraria milhões de linhas de grade.
        for amplitude in (1e308, 5e307, 1e6, math.inf):
            superficie = RecordingSurface()
            render([amplitude, -amplitude], amplitude, 100, 100, superficie)
            self.assertEqual(superficie.calls, [], amplitude)

    def test_largest_plottable_amplitude(self):
        operacoes = build_drawing_operations([1000, -1000], 1000, 800, 400)
        self.assertEqual(len(textos(operacoes)), 2001)

    def test_invalid_dimensions_is_noop(self):
        superficie = RecordingSurface()
        render([1, -1], 1, 0, 100, superficie)
        self.assertEqual(superficie.calls, [])


if __name__ == '__main__':
    unittest.main()
