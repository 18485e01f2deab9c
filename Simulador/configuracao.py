# Simulador/configuracao.py

# Configuração padrão do plotador. A GUI e o modo console partem destes valores
# e sobrescrevem apenas o que o usuário informar.
DEFAULT_CONFIG = {
    "canvas_width": 800,        # Largura da área de desenho (px)
    "canvas_height": 400,       # Altura da área de desenho (px)
    "encoding_type": "NRZ-L",   # Esquema de codificação de linha inicial
    "amplitude": 5.0,           # Nível de pico simétrico (V)
    "binary_input": "1011",     # Sequência de bits inicial
    "log_level": "INFO",        # Nível do logging nos pontos de entrada
}

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def build_config(params=None):
    """
    Cria um dicionário de configuração a partir dos padrões, aplicando os valores
    de 'params' que não forem None.

    Raises:
        ValueError: se 'params' contiver uma chave que não existe na configuração.
    """
    config = dict(DEFAULT_CONFIG)
    if not params:
        return config

    unknown = set(params) - set(DEFAULT_CONFIG)
    if unknown:
        raise ValueError(f"Chave(s) de configuração desconhecida(s): {', '.join(sorted(unknown))}")

    config.update({key: value for key, value in params.items() if value is not None})
    return config
