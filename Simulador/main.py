# Simulador/main.py

import logging
import sys
import os

# Ajusta o PYTHONPATH para que os módulos das camadas possam ser importados quando executado como script
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if project_root not in sys.path:
    sys.path.append(project_root)

from CamadaFisica.modulacoes_digitais import DigitalEncoder, ESQUEMAS_CODIFICACAO
from CamadaFisica import renderizador_sinal
from Simulador.configuracao import build_config, LOG_FORMAT
from Utilidades.utils import format_log, parse_amplitude

logger = logging.getLogger(__name__)


class SimuladorCodificacao:
    """
    Orquestra o fluxo do plotador: codifica a sequência de bits com o esquema escolhido
    e renderiza as amostras resultantes na superfície de desenho.
    Cada chamada é independente (estado do codificador e desenho recriados a cada plot).
    """
    def __init__(self, config=None):
        """
        Args:
            config (dict, opcional): Sobrescritas da configuração padrão (ver Simulador.configuracao).
        """
        self.config = build_config(config)
        self.encoder = DigitalEncoder()
        logger.debug(f"SimuladorCodificacao inicializado com {self.config}")

    def get_encoding_options(self) -> list:
        return list(ESQUEMAS_CODIFICACAO)

    def encode(self, bits: str, encoding_type: str, amplitude: float):
        """Aplica a codificação de linha e registra o resultado no log."""
        signal = self.encoder.encode(bits, encoding_type, amplitude)
        amostras_por_bit = self.encoder.samples_per_bit(encoding_type)
        logger.info(f"Codificação {encoding_type} ({amostras_por_bit} amostra(s)/bit): "
                    f"{format_log(bits)} -> {len(signal)} amostras")
        return signal

    def plot_signal(self, bits: str, encoding_type: str, amplitude: float, surface, width=None, height=None):
        """
        Codifica e desenha o sinal na superfície fornecida.

        Args:
            bits (str): Sequência binária (caracteres diferentes de '0'/'1' não são rejeitados).
            encoding_type (str): Esquema de codificação de linha.
            amplitude (float): Tensão de pico (deve ser > 0 para haver desenho).
            surface: Superfície de desenho (clear/draw_line/draw_text).
            width, height (float, opcional): Dimensões da área; padrão da configuração.

        Returns:
            np.ndarray: Amostras geradas pelo codificador.
        """
        width = self.config["canvas_width"] if width is None else width
        height = self.config["canvas_height"] if height is None else height

        signal = self.encode(bits, encoding_type, amplitude)
        if len(signal) == 0:
            logger.info("Nenhuma amostra gerada, nada a plotar.")
            return signal

        renderizador_sinal.render(signal, amplitude, width, height, surface)
        return signal


def main(argv=None):
    """
    Modo console: exibe no log as amostras de todos os esquemas para uma sequência de bits.
    Uso: python -m Simulador.main [bits] [amplitude]
    """
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=build_config()["log_level"], format=LOG_FORMAT)
    try:
        params = {
            "binary_input": argv[0] if len(argv) > 0 else None,
            "amplitude": parse_amplitude(argv[1]) if len(argv) > 1 else None,
        }
    except ValueError as e:
        logger.error(f"Argumento inválido: {e}")
        return 2
    config = build_config(params)

    simulador = SimuladorCodificacao(config)
    bits = config["binary_input"]
    amplitude = config["amplitude"]

    logger.info(f"--- CODIFICAÇÃO DE '{format_log(bits)}' (amplitude {amplitude} V) ---")
    for encoding_type in simulador.get_encoding_options():
        signal = simulador.encode(bits, encoding_type, amplitude)
        logger.info(f"  {encoding_type:<24} {signal.tolist()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
