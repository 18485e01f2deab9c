import logging

import numpy as np

logger = logging.getLogger(__name__)

# Esquemas de codificação de linha suportados (enumeração fechada, na ordem exibida na GUI).
ESQUEMAS_CODIFICACAO = [
    "NRZ-L",
    "NRZ-I",
    "Bipolar AMI",
    "Pseudoternary",
    "Manchester",
    "Differential Manchester",
]

# Grafias alternativas aceitas para os mesmos esquemas.
ALIASES_CODIFICACAO = {
    "Bipolar-AMI": "Bipolar AMI",
    "Differential-Manchester": "Differential Manchester",
}


# --- Funções de passo: (last, bit, amplitude) -> (novo last, amostras emitidas) ---

def passo_nrz_l(last, bit, amplitude):
    """NRZ-L: o nível representa diretamente o valor do bit (sem memória)."""
    return last, [amplitude if bit == "1" else -amplitude]


def passo_nrz_i(last, bit, amplitude):
    """NRZ-I: inverte o nível a cada bit '1'; bit '0' repete o nível anterior."""
    if bit == "1":
        last = -last
    return last, [last]


def passo_bipolar_ami(last, bit, amplitude):
    """Bipolar AMI: bits '1' alternam a polaridade, bits '0' ficam em zero."""
    if bit == "1":
        last = -last
        return last, [last]
    return last, [0.0]


def passo_pseudoternary(last, bit, amplitude):
    """Pseudoternário: inverso do AMI, bits '0' alternam a polaridade e bits '1' ficam em zero."""
    if bit == "0":
        last = -last
        return last, [last]
    return last, [0.0]


def passo_manchester(last, bit, amplitude):
    """Manchester: '1' -> [+V, -V], '0' -> [-V, +V]."""
    if bit == "1":
        return last, [amplitude, -amplitude]
    return last, [-amplitude, amplitude]


def passo_manchester_diferencial(last, bit, amplitude):
    """
    Manchester Diferencial: bit '0' provoca transição no início do período,
    bit '1' mantém o nível. Sempre há transição no meio do bit.
    """
    if bit == "0":
        last = -last
    return last, [last, -last]


# Mapeamento nome -> (função de passo, amostras por bit).
CODIFICACOES_LINHA = {
    "NRZ-L": (passo_nrz_l, 1),
    "NRZ-I": (passo_nrz_i, 1),
    "Bipolar AMI": (passo_bipolar_ami, 1),
    "Pseudoternary": (passo_pseudoternary, 1),
    "Manchester": (passo_manchester, 2),
    "Differential Manchester": (passo_manchester_diferencial, 2),
}


def _normalizar_bit(bit):
    # Aceita tanto caracteres quanto inteiros (ex.: [1, 0, 1]).
    return bit if isinstance(bit, str) else str(bit)


class DigitalEncoder:
    """Implementa esquemas de codificação de linha (modulação em banda base).
    Atua na Camada Física, convertendo bits digitais em níveis de tensão (uma ou duas amostras por bit).
    """

    def resolve_scheme(self, encoding_type):
        """Retorna o nome canônico do esquema, ou None se ele for desconhecido."""
        nome = ALIASES_CODIFICACAO.get(encoding_type, encoding_type)
        return nome if nome in CODIFICACOES_LINHA else None

    def samples_per_bit(self, encoding_type):
        """Quantidade de amostras emitidas por bit: 1 (NRZ, AMI, Pseudoternário), 2 (Manchester) ou 0 se desconhecido."""
        nome = self.resolve_scheme(encoding_type)
        if nome is None:
            return 0
        return CODIFICACOES_LINHA[nome][1]

    def encode(self, bits, encoding_type, amplitude):
        """
        Interface para selecionar e aplicar um método específico de codificação de linha.

        Parâmetros:
        - bits: sequência binária a ser codificada (string de '0'/'1' ou lista de inteiros).
          Caracteres diferentes do testado pelo esquema caem no ramo padrão (equivalem ao outro bit).
        - encoding_type: nome do esquema (ver ESQUEMAS_CODIFICACAO).
        - amplitude: nível de pico simétrico (+V/-V) em volts.

        Retorna um np.ndarray com as amostras. Esquema desconhecido gera um array vazio.
        """
        nome = self.resolve_scheme(encoding_type)
        if nome is None:
            logger.warning(f"encode: tipo de codificação desconhecido '{encoding_type}', nenhuma amostra gerada")
            return np.array([], dtype=float)

        passo, _ = CODIFICACOES_LINHA[nome]
        amplitude = float(amplitude)
        last = -amplitude  # Semente reiniciada a cada chamada; o primeiro pulso sai positivo.
        signal = []
        for bit in bits:
            last, amostras = passo(last, _normalizar_bit(bit), amplitude)
            signal.extend(amostras)

        logger.debug(f"encode: {nome} gerou {len(signal)} amostras")
        return np.array(signal, dtype=float)

    def nrz_l(self, bits, amplitude=1.0):
        """
        Implementa codificação NRZ-L (Non-Return to Zero, Level):
        - Bit '1': nível positivo constante (+V)
        - Bit '0': nível negativo constante (-V)
        """
        return self.encode(bits, "NRZ-L", amplitude)

    def nrz_i(self, bits, amplitude=1.0):
        """
        Implementa codificação NRZ-I (Non-Return to Zero, Invert on ones):
        o nível inverte a cada bit '1' e permanece igual em bits '0'.
        """
        return self.encode(bits, "NRZ-I", amplitude)

    def bipolar_ami(self, bits, amplitude=1.0):
        """
        Implementa codificação Bipolar AMI (Alternate Mark Inversion):
        - Bit '0': nível zero (ausência de pulso)
        - Bit '1': alterna a polaridade do nível (+V e -V) a cada ocorrência

        A polaridade alternada permite detectar erros por violação de polaridade.
        """
        return self.encode(bits, "Bipolar AMI", amplitude)

    def pseudoternary(self, bits, amplitude=1.0):
        """Implementa codificação Pseudoternária: bits '0' alternam +V/-V, bits '1' ficam em zero."""
        return self.encode(bits, "Pseudoternary", amplitude)

    def manchester(self, bits, amplitude=1.0):
        """
        Implementa codificação Manchester:
        Cada bit é dividido em duas metades:
        - Bit '1': primeira metade positiva (+V), segunda metade negativa (-V)
        - Bit '0': primeira metade negativa (-V), segunda metade positiva (+V)

        A mudança de polaridade no meio do bit garante sincronização entre transmissor e receptor.
        """
        return self.encode(bits, "Manchester", amplitude)

    def differential_manchester(self, bits, amplitude=1.0):
        """
        Implementa codificação Manchester Diferencial:
        a polaridade da primeira metade depende do histórico de transições
        (bit '0' inverte, bit '1' mantém), e a segunda metade é sempre a oposta.
        """
        return self.encode(bits, "Differential Manchester", amplitude)
